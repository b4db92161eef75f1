from .aggregator import StatusAggregator, build_aggregator
from .formatting import format_bytes, format_uptime
from .redaction import MASK, SENSITIVE_PATTERNS, is_sensitive, redact

__all__ = [
    "StatusAggregator",
    "build_aggregator",
    "format_bytes",
    "format_uptime",
    "MASK",
    "SENSITIVE_PATTERNS",
    "is_sensitive",
    "redact",
]
