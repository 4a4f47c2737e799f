import logging
from dataclasses import dataclass
from pathlib import Path

from ..config import DEFAULT_ACCOUNT_ID, GatewayConfig, TelegramAccountConfig
from .base import (
    SOURCE_NONE,
    account_ids,
    account_name,
    fallback_secret,
    normalize_account_id,
    text,
)

logger = logging.getLogger(__name__)

SERVICE = "switchboard-telegram"
TOKEN_KEY = "bot_token"  # noqa: S105
TOKEN_ENV = "TELEGRAM_BOT_TOKEN"  # noqa: S105


@dataclass(frozen=True)
class TelegramAccount:
    account_id: str
    enabled: bool
    name: str | None
    token: str
    token_source: str
    token_file: str | None = None
    token_file_key: str | None = None


def is_enabled(cfg: GatewayConfig) -> bool:
    return cfg.telegram.enabled


def list_account_ids(cfg: GatewayConfig) -> list[str]:
    section = cfg.telegram
    has_base = bool(text(section.bot_token) or text(section.token_file))
    return account_ids(section.accounts, include_default=has_base)


def _read_token_file(path: str) -> str:
    try:
        return Path(path).expanduser().read_text().strip()
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.debug("telegram token file %s unreadable: %s", path, e)
        return ""


def resolve_account(cfg: GatewayConfig, account_id: str | None = None) -> TelegramAccount:
    """Token precedence: account botToken, account tokenFile; then, for the default
    account only, base botToken, base tokenFile, TELEGRAM_BOT_TOKEN, keyring.

    A declared token file that cannot be read ends the search with no token.
    """
    account_id = normalize_account_id(account_id)
    section = cfg.telegram
    override = section.accounts.get(account_id, TelegramAccountConfig())
    is_default = account_id == DEFAULT_ACCOUNT_ID

    token_file, token_file_key = None, None
    if text(override.token_file):
        token_file, token_file_key = text(override.token_file), f"telegram.accounts.{account_id}.tokenFile"
    elif is_default and text(section.token_file):
        token_file, token_file_key = text(section.token_file), "telegram.tokenFile"

    if text(override.bot_token):
        token, source = text(override.bot_token), "config"
    elif text(override.token_file):
        token = _read_token_file(token_file or "")
        source = "tokenFile" if token else SOURCE_NONE
    elif not is_default:
        token, source = "", SOURCE_NONE
    elif text(section.bot_token):
        token, source = text(section.bot_token), "config"
    elif token_file:
        token = _read_token_file(token_file)
        source = "tokenFile" if token else SOURCE_NONE
    else:
        token, source = fallback_secret(TOKEN_ENV, SERVICE, TOKEN_KEY)

    return TelegramAccount(
        account_id=account_id,
        enabled=section.enabled and override.enabled,
        name=account_name(override.name, section.name, is_default),
        token=token,
        token_source=source,
        token_file=token_file,
        token_file_key=token_file_key,
    )


def resolve_accounts(cfg: GatewayConfig) -> list[TelegramAccount]:
    return [resolve_account(cfg, account_id) for account_id in list_account_ids(cfg)]
