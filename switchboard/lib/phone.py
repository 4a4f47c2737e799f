import re

__all__ = ["normalize_e164"]

_NON_DIGIT_RE = re.compile(r"\D")
_PREFIXES = ("whatsapp:", "tel:", "signal:")


def normalize_e164(value: str | None) -> str:
    """Best-effort canonical phone number: '+<digits>', or '' when no digits remain."""
    raw = (value or "").strip()
    lower = raw.lower()
    for prefix in _PREFIXES:
        if lower.startswith(prefix):
            raw = raw[len(prefix) :]
            break
    digits = _NON_DIGIT_RE.sub("", raw)
    return f"+{digits}" if digits else ""
