"""Helpers shared by the per-provider account resolvers."""

import logging
import os
from collections.abc import Mapping
from typing import Any

import keyring

from ..config import DEFAULT_ACCOUNT_ID

__all__ = [
    "SOURCE_NONE",
    "account_ids",
    "account_name",
    "env_value",
    "fallback_secret",
    "keyring_value",
    "normalize_account_id",
    "text",
]

logger = logging.getLogger(__name__)

SOURCE_NONE = "none"


def text(value: str | None) -> str:
    return (value or "").strip()


def normalize_account_id(account_id: str | None) -> str:
    return text(account_id) or DEFAULT_ACCOUNT_ID


def env_value(name: str) -> str:
    return text(os.environ.get(name))


def keyring_value(service: str, key: str) -> str:
    """Read a secret from the OS keyring; any backend failure reads as no value."""
    try:
        value = keyring.get_password(service, key)
    except Exception as e:
        logger.debug("keyring lookup %s/%s failed: %s", service, key, e)
        return ""
    return text(value)


def account_ids(accounts: Mapping[str, Any], include_default: bool = False) -> list[str]:
    """Configured override ids, sorted. 'default' is added when nothing else is configured."""
    ids = sorted(account_id for account_id in accounts if account_id)
    if DEFAULT_ACCOUNT_ID not in ids and (include_default or not ids):
        ids.insert(0, DEFAULT_ACCOUNT_ID)
    return ids


def fallback_secret(env_name: str, service: str, key: str) -> tuple[str, str]:
    """Default-account fallback: environment first, then the keyring."""
    if value := env_value(env_name):
        return value, "env"
    if value := keyring_value(service, key):
        return value, "keyring"
    return "", SOURCE_NONE


def account_name(override_name: str | None, base_name: str | None, is_default: bool) -> str | None:
    return text(override_name) or (text(base_name) if is_default else "") or None
