import dataclasses
from dataclasses import dataclass

from ..config import DEFAULT_ACCOUNT_ID, GatewayConfig
from .base import SOURCE_NONE, env_value, text

APP_ID_ENV = "MSTEAMS_APP_ID"
APP_PASSWORD_ENV = "MSTEAMS_APP_PASSWORD"  # noqa: S105
TENANT_ID_ENV = "MSTEAMS_TENANT_ID"


@dataclass(frozen=True)
class MSTeamsCredentials:
    app_id: str
    app_password: str
    tenant_id: str


@dataclass(frozen=True)
class MSTeamsAccount:
    account_id: str
    enabled: bool
    app_id: str
    app_id_source: str
    app_password: str
    app_password_source: str
    tenant_id: str
    tenant_id_source: str
    credentials: MSTeamsCredentials | None = None


def is_enabled(cfg: GatewayConfig) -> bool:
    return cfg.msteams.enabled


def list_account_ids(cfg: GatewayConfig) -> list[str]:
    return [DEFAULT_ACCOUNT_ID]


def _value(configured: str | None, env_name: str) -> tuple[str, str]:
    if text(configured):
        return text(configured), "config"
    if value := env_value(env_name):
        return value, "env"
    return "", SOURCE_NONE


def resolve_account(cfg: GatewayConfig, account_id: str | None = None) -> MSTeamsAccount:
    """MS Teams has a single bot registration; each field falls back to its env var on its own."""
    section = cfg.msteams
    app_id, app_id_source = _value(section.app_id, APP_ID_ENV)
    app_password, app_password_source = _value(section.app_password, APP_PASSWORD_ENV)
    tenant_id, tenant_id_source = _value(section.tenant_id, TENANT_ID_ENV)
    return MSTeamsAccount(
        account_id=DEFAULT_ACCOUNT_ID,
        enabled=section.enabled,
        app_id=app_id,
        app_id_source=app_id_source,
        app_password=app_password,
        app_password_source=app_password_source,
        tenant_id=tenant_id,
        tenant_id_source=tenant_id_source,
    )


def resolve_accounts(cfg: GatewayConfig) -> list[MSTeamsAccount]:
    """The account is ready only when resolve_credentials yields a full set."""
    account = resolve_account(cfg)
    return [dataclasses.replace(account, credentials=resolve_credentials(cfg))]


def resolve_credentials(cfg: GatewayConfig) -> MSTeamsCredentials | None:
    account = resolve_account(cfg)
    if not (account.app_id and account.app_password and account.tenant_id):
        return None
    return MSTeamsCredentials(
        app_id=account.app_id,
        app_password=account.app_password,
        tenant_id=account.tenant_id,
    )
