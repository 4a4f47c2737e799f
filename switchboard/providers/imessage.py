from dataclasses import dataclass

from ..config import DEFAULT_ACCOUNT_ID, GatewayConfig, IMessageAccountConfig
from .base import account_ids, account_name, normalize_account_id, text


@dataclass(frozen=True)
class IMessageAccount:
    account_id: str
    enabled: bool
    name: str | None
    configured: bool
    cli_path: str | None = None
    db_path: str | None = None
    service: str | None = None
    region: str | None = None


def is_enabled(cfg: GatewayConfig) -> bool:
    return cfg.imessage.enabled


def list_account_ids(cfg: GatewayConfig) -> list[str]:
    return account_ids(cfg.imessage.accounts)


def resolve_account(cfg: GatewayConfig, account_id: str | None = None) -> IMessageAccount:
    account_id = normalize_account_id(account_id)
    section = cfg.imessage
    override = section.accounts.get(account_id, IMessageAccountConfig())

    cli_path = text(override.cli_path) or text(section.cli_path)
    db_path = text(override.db_path) or text(section.db_path)
    service = text(override.service) or text(section.service)
    region = text(override.region) or text(section.region)
    return IMessageAccount(
        account_id=account_id,
        enabled=section.enabled and override.enabled,
        name=account_name(override.name, section.name, account_id == DEFAULT_ACCOUNT_ID),
        configured=bool(cli_path or db_path or service or region),
        cli_path=cli_path or None,
        db_path=db_path or None,
        service=service or None,
        region=region or None,
    )


def resolve_accounts(cfg: GatewayConfig) -> list[IMessageAccount]:
    return [resolve_account(cfg, account_id) for account_id in list_account_ids(cfg)]
