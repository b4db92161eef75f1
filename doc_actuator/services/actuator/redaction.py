"""민감 프로퍼티 마스킹 — 키는 유지, 값만 치환."""

MASK = "******"

SENSITIVE_PATTERNS = (
    "password",
    "secret",
    "token",
    "key",
    "credential",
    "auth",
    "private",
    "api_key",
    "apikey",
)


def is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(pattern in lowered for pattern in SENSITIVE_PATTERNS)


def redact(key: str, value: str) -> str:
    return MASK if is_sensitive(key) else value
