from dataclasses import dataclass

from ..config import (
    DEFAULT_ACCOUNT_ID,
    DEFAULT_SIGNAL_HOST,
    DEFAULT_SIGNAL_PORT,
    GatewayConfig,
    SignalAccountConfig,
)
from .base import account_ids, account_name, normalize_account_id, text


@dataclass(frozen=True)
class SignalAccount:
    account_id: str
    enabled: bool
    name: str | None
    configured: bool
    base_url: str
    account: str | None = None
    cli_path: str | None = None


def is_enabled(cfg: GatewayConfig) -> bool:
    return cfg.signal.enabled


def list_account_ids(cfg: GatewayConfig) -> list[str]:
    return account_ids(cfg.signal.accounts)


def resolve_account(cfg: GatewayConfig, account_id: str | None = None) -> SignalAccount:
    """Merge base settings with the account override.

    configured is true once any daemon or account setting is given explicitly.
    """
    account_id = normalize_account_id(account_id)
    section = cfg.signal
    override = section.accounts.get(account_id, SignalAccountConfig())

    phone = text(override.account) or text(section.account)
    http_url = text(override.http_url) or text(section.http_url)
    http_host = text(override.http_host) or text(section.http_host)
    http_port = override.http_port or section.http_port
    cli_path = text(override.cli_path) or text(section.cli_path)

    base_url = http_url or f"http://{http_host or DEFAULT_SIGNAL_HOST}:{http_port or DEFAULT_SIGNAL_PORT}"
    return SignalAccount(
        account_id=account_id,
        enabled=section.enabled and override.enabled,
        name=account_name(override.name, section.name, account_id == DEFAULT_ACCOUNT_ID),
        configured=bool(phone or http_url or http_host or http_port or cli_path),
        base_url=base_url.rstrip("/"),
        account=phone or None,
        cli_path=cli_path or None,
    )


def resolve_accounts(cfg: GatewayConfig) -> list[SignalAccount]:
    return [resolve_account(cfg, account_id) for account_id in list_account_ids(cfg)]
