"""사람이 읽기 쉬운 값 포맷 — 바이트 크기, 업타임."""

_BYTE_UNITS = ("B", "KB", "MB", "GB")


def format_bytes(num_bytes: int | float) -> str:
    """1024 단위로 B/KB/MB/GB 스케일, 소수점 2자리.

    >>> format_bytes(1536)
    '1.50 KB'
    """
    value = float(num_bytes)
    unit = 0
    while value >= 1024 and unit < len(_BYTE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{value:.2f} {_BYTE_UNITS[unit]}"


def format_uptime(seconds: int | float) -> str:
    """일/시/분/초 분해. 0인 상위 단위는 생략, 초는 항상 포함.

    >>> format_uptime(90061)
    '1d 1h 1m 1s'
    """
    total = int(seconds)
    days, rem = divmod(total, 86400)
    hours, rem = divmod(rem, 3600)
    minutes, secs = divmod(rem, 60)

    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    parts.append(f"{secs}s")
    return " ".join(parts)
