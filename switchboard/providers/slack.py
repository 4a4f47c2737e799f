from dataclasses import dataclass

from ..config import DEFAULT_ACCOUNT_ID, GatewayConfig, SlackAccountConfig
from .base import (
    SOURCE_NONE,
    account_ids,
    account_name,
    fallback_secret,
    normalize_account_id,
    text,
)

SERVICE = "switchboard-slack"
BOT_TOKEN_KEY = "bot_token"  # noqa: S105
APP_TOKEN_KEY = "app_token"  # noqa: S105
BOT_TOKEN_ENV = "SLACK_BOT_TOKEN"  # noqa: S105
APP_TOKEN_ENV = "SLACK_APP_TOKEN"  # noqa: S105


@dataclass(frozen=True)
class SlackAccount:
    account_id: str
    enabled: bool
    name: str | None
    bot_token: str
    bot_token_source: str
    app_token: str
    app_token_source: str


def is_enabled(cfg: GatewayConfig) -> bool:
    return cfg.slack.enabled


def list_account_ids(cfg: GatewayConfig) -> list[str]:
    section = cfg.slack
    has_base = bool(text(section.bot_token) or text(section.app_token))
    return account_ids(section.accounts, include_default=has_base)


def _token(
    override: str | None, base: str | None, is_default: bool, env_name: str, key: str
) -> tuple[str, str]:
    if text(override):
        return text(override), "config"
    if not is_default:
        return "", SOURCE_NONE
    if text(base):
        return text(base), "config"
    return fallback_secret(env_name, SERVICE, key)


def resolve_account(cfg: GatewayConfig, account_id: str | None = None) -> SlackAccount:
    """Bot and app tokens resolve independently, so one may come from config and the other from env."""
    account_id = normalize_account_id(account_id)
    section = cfg.slack
    override = section.accounts.get(account_id, SlackAccountConfig())
    is_default = account_id == DEFAULT_ACCOUNT_ID

    bot_token, bot_source = _token(
        override.bot_token, section.bot_token, is_default, BOT_TOKEN_ENV, BOT_TOKEN_KEY
    )
    app_token, app_source = _token(
        override.app_token, section.app_token, is_default, APP_TOKEN_ENV, APP_TOKEN_KEY
    )
    return SlackAccount(
        account_id=account_id,
        enabled=section.enabled and override.enabled,
        name=account_name(override.name, section.name, is_default),
        bot_token=bot_token,
        bot_token_source=bot_source,
        app_token=app_token,
        app_token_source=app_source,
    )


def resolve_accounts(cfg: GatewayConfig) -> list[SlackAccount]:
    return [resolve_account(cfg, account_id) for account_id in list_account_ids(cfg)]
