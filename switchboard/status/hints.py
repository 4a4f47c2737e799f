"""Render credential strings without leaking them."""

import hashlib

__all__ = ["format_token_hint", "sha256_prefix"]

_REVEAL_ALL_MAX = 10


def sha256_prefix(value: str, length: int = 8) -> str:
    return hashlib.sha256(value.encode()).hexdigest()[:length]


def format_token_hint(token: str, *, show_secrets: bool) -> str:
    """Fingerprint a secret, or partially reveal it when show_secrets is set.

    Masked form is 'sha256:<8 hex> · len N'. Revealed form shows short values
    whole and long ones as 'head…tail'.
    """
    t = token.strip()
    if not t:
        return "empty"
    if not show_secrets:
        return f"sha256:{sha256_prefix(t)} · len {len(t)}"
    if len(t) <= _REVEAL_ALL_MAX:
        return f"{t} · len {len(t)}"
    return f"{t[:4]}…{t[-4:]} · len {len(t)}"
