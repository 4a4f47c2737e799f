from .hints import format_token_hint, sha256_prefix
from .probe import path_exists
from .report import build_providers_table
from .sources import summarize_sources

__all__ = [
    "build_providers_table",
    "format_token_hint",
    "path_exists",
    "sha256_prefix",
    "summarize_sources",
]
