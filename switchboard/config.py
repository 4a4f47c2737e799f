import dataclasses
import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .core.errors import ConfigError

logger = logging.getLogger(__name__)

STATE_DIR = Path(os.environ.get("SWITCHBOARD_STATE_DIR") or Path.home() / ".switchboard").expanduser()
CONFIG_NAME = "config.yaml"

DEFAULT_ACCOUNT_ID = "default"
DEFAULT_DM_POLICY = "pairing"
DEFAULT_SIGNAL_HOST = "127.0.0.1"
DEFAULT_SIGNAL_PORT = 8080

_INVALID = object()
_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def config_path() -> Path:
    """SWITCHBOARD_CONFIG wins over <state dir>/config.yaml."""
    override = os.environ.get("SWITCHBOARD_CONFIG", "").strip()
    if override:
        return Path(override).expanduser()
    return STATE_DIR / CONFIG_NAME


def credentials_dir() -> Path:
    return STATE_DIR / "credentials"


@dataclass(frozen=True)
class WhatsAppAccountConfig:
    name: str | None = None
    enabled: bool = True
    self_chat_mode: bool | None = None
    dm_policy: str | None = None
    allow_from: list[str] | None = None
    auth_dir: str | None = None


@dataclass(frozen=True)
class WhatsAppConfig(WhatsAppAccountConfig):
    accounts: dict[str, WhatsAppAccountConfig] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class TelegramAccountConfig:
    name: str | None = None
    enabled: bool = True
    bot_token: str | None = None
    token_file: str | None = None


@dataclass(frozen=True)
class TelegramConfig(TelegramAccountConfig):
    accounts: dict[str, TelegramAccountConfig] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class DiscordAccountConfig:
    name: str | None = None
    enabled: bool = True
    token: str | None = None


@dataclass(frozen=True)
class DiscordConfig(DiscordAccountConfig):
    accounts: dict[str, DiscordAccountConfig] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class SlackAccountConfig:
    name: str | None = None
    enabled: bool = True
    bot_token: str | None = None
    app_token: str | None = None


@dataclass(frozen=True)
class SlackConfig(SlackAccountConfig):
    accounts: dict[str, SlackAccountConfig] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class SignalAccountConfig:
    name: str | None = None
    enabled: bool = True
    account: str | None = None
    http_url: str | None = None
    http_host: str | None = None
    http_port: int | None = None
    cli_path: str | None = None


@dataclass(frozen=True)
class SignalConfig(SignalAccountConfig):
    accounts: dict[str, SignalAccountConfig] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class IMessageAccountConfig:
    name: str | None = None
    enabled: bool = True
    cli_path: str | None = None
    db_path: str | None = None
    service: str | None = None
    region: str | None = None


@dataclass(frozen=True)
class IMessageConfig(IMessageAccountConfig):
    accounts: dict[str, IMessageAccountConfig] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class MSTeamsConfig:
    enabled: bool = True
    app_id: str | None = None
    app_password: str | None = None
    tenant_id: str | None = None


_SECTIONS: dict[str, tuple[type, type | None]] = {
    "whatsapp": (WhatsAppConfig, WhatsAppAccountConfig),
    "telegram": (TelegramConfig, TelegramAccountConfig),
    "discord": (DiscordConfig, DiscordAccountConfig),
    "slack": (SlackConfig, SlackAccountConfig),
    "signal": (SignalConfig, SignalAccountConfig),
    "imessage": (IMessageConfig, IMessageAccountConfig),
    "msteams": (MSTeamsConfig, None),
}


@dataclass(frozen=True)
class GatewayConfig:
    """Loaded gateway configuration. Every section defaults to an enabled, empty provider."""

    whatsapp: WhatsAppConfig = field(default_factory=WhatsAppConfig)
    telegram: TelegramConfig = field(default_factory=TelegramConfig)
    discord: DiscordConfig = field(default_factory=DiscordConfig)
    slack: SlackConfig = field(default_factory=SlackConfig)
    signal: SignalConfig = field(default_factory=SignalConfig)
    imessage: IMessageConfig = field(default_factory=IMessageConfig)
    msteams: MSTeamsConfig = field(default_factory=MSTeamsConfig)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "GatewayConfig":
        sections: dict[str, Any] = {}
        for key, (section_cls, account_cls) in _SECTIONS.items():
            value = raw.get(key)
            if value is None:
                continue
            if not isinstance(value, dict):
                logger.warning("ignoring %s: expected a mapping, got %s", key, type(value).__name__)
                continue
            sections[key] = _section(section_cls, account_cls, value, key)
        return cls(**sections)


def _snake(key: str) -> str:
    return _CAMEL_RE.sub("_", key).lower()


def _coerce(value: Any, annotation: Any) -> Any:
    if annotation is bool or annotation == (bool | None):
        return value if isinstance(value, bool) else _INVALID
    if isinstance(value, bool):
        return _INVALID
    if annotation == (str | None):
        return str(value) if isinstance(value, (str, int, float)) else _INVALID
    if annotation == (int | None):
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.strip().isdigit():
            return int(value.strip())
        return _INVALID
    if annotation == (list[str] | None):
        if isinstance(value, (str, int)):
            return [str(value)]
        if isinstance(value, list):
            return [str(v) for v in value if v is not None]
    return _INVALID


def _fields(cls: type, raw: dict[Any, Any], where: str) -> dict[str, Any]:
    known = {f.name: f for f in dataclasses.fields(cls) if f.name != "accounts"}
    out: dict[str, Any] = {}
    for raw_key, value in raw.items():
        name = _snake(str(raw_key))
        if name == "accounts" or value is None:
            continue
        dc_field = known.get(name)
        if dc_field is None:
            logger.debug("unknown config key %s.%s", where, raw_key)
            continue
        coerced = _coerce(value, dc_field.type)
        if coerced is _INVALID:
            logger.warning(
                "ignoring %s.%s: unexpected %s value", where, raw_key, type(value).__name__
            )
            continue
        out[name] = coerced
    return out


def _section(section_cls: type, account_cls: type | None, raw: dict[Any, Any], key: str) -> Any:
    values = _fields(section_cls, raw, key)
    if account_cls is None:
        return section_cls(**values)

    accounts: dict[str, Any] = {}
    raw_accounts = raw.get("accounts")
    if isinstance(raw_accounts, dict):
        for account_id, override in raw_accounts.items():
            where = f"{key}.accounts.{account_id}"
            if override is None:
                override = {}
            if not isinstance(override, dict):
                logger.warning("ignoring %s: expected a mapping", where)
                continue
            accounts[str(account_id).strip()] = account_cls(**_fields(account_cls, override, where))
    elif raw_accounts is not None:
        logger.warning("ignoring %s.accounts: expected a mapping", key)
    return section_cls(**values, accounts=accounts)


def load_config(path: Path | None = None) -> GatewayConfig:
    """Read the gateway config. A missing file yields defaults; a broken one raises ConfigError."""
    path = path or config_path()
    if not path.exists():
        return GatewayConfig()
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError(str(path), "top level must be a mapping")
    return GatewayConfig.from_dict(data)
