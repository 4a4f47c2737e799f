from dataclasses import dataclass

from ..config import DEFAULT_ACCOUNT_ID, DiscordAccountConfig, GatewayConfig
from .base import (
    SOURCE_NONE,
    account_ids,
    account_name,
    fallback_secret,
    normalize_account_id,
    text,
)

SERVICE = "switchboard-discord"
TOKEN_KEY = "bot_token"  # noqa: S105
TOKEN_ENV = "DISCORD_BOT_TOKEN"  # noqa: S105


@dataclass(frozen=True)
class DiscordAccount:
    account_id: str
    enabled: bool
    name: str | None
    token: str
    token_source: str


def is_enabled(cfg: GatewayConfig) -> bool:
    return cfg.discord.enabled


def list_account_ids(cfg: GatewayConfig) -> list[str]:
    section = cfg.discord
    return account_ids(section.accounts, include_default=bool(text(section.token)))


def resolve_account(cfg: GatewayConfig, account_id: str | None = None) -> DiscordAccount:
    account_id = normalize_account_id(account_id)
    section = cfg.discord
    override = section.accounts.get(account_id, DiscordAccountConfig())
    is_default = account_id == DEFAULT_ACCOUNT_ID

    if text(override.token):
        token, source = text(override.token), "config"
    elif not is_default:
        token, source = "", SOURCE_NONE
    elif text(section.token):
        token, source = text(section.token), "config"
    else:
        token, source = fallback_secret(TOKEN_ENV, SERVICE, TOKEN_KEY)

    return DiscordAccount(
        account_id=account_id,
        enabled=section.enabled and override.enabled,
        name=account_name(override.name, section.name, is_default),
        token=token,
        token_source=source,
    )


def resolve_accounts(cfg: GatewayConfig) -> list[DiscordAccount]:
    return [resolve_account(cfg, account_id) for account_id in list_account_ids(cfg)]
