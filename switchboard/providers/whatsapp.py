import asyncio
import dataclasses
import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path

from .. import config
from ..config import DEFAULT_ACCOUNT_ID, DEFAULT_DM_POLICY, GatewayConfig, WhatsAppAccountConfig
from ..core.models import Probe
from ..lib.phone import normalize_e164
from .base import account_ids, account_name, normalize_account_id, text

logger = logging.getLogger(__name__)

CREDS_FILE = "creds.json"


@dataclass(frozen=True)
class WhatsAppAccount:
    account_id: str
    enabled: bool
    name: str | None
    self_chat_mode: bool
    dm_policy: str
    allow_from: list[str]
    auth_dir: str
    linked: bool = False
    auth_age_ms: int | None = None
    self_e164: str | None = None


def is_enabled(cfg: GatewayConfig) -> bool:
    return cfg.whatsapp.enabled


def list_account_ids(cfg: GatewayConfig) -> list[str]:
    return account_ids(cfg.whatsapp.accounts)


def default_auth_dir(account_id: str) -> Path:
    return config.credentials_dir() / "whatsapp" / account_id


def resolve_account(cfg: GatewayConfig, account_id: str | None = None) -> WhatsAppAccount:
    """Resolve settings only; session state is filled in by probe_session."""
    account_id = normalize_account_id(account_id)
    section = cfg.whatsapp
    override = section.accounts.get(account_id, WhatsAppAccountConfig())
    is_default = account_id == DEFAULT_ACCOUNT_ID

    auth_dir = text(override.auth_dir) or (text(section.auth_dir) if is_default else "")
    self_chat_mode = override.self_chat_mode
    if self_chat_mode is None:
        self_chat_mode = bool(section.self_chat_mode)
    allow_from = override.allow_from if override.allow_from is not None else section.allow_from

    return WhatsAppAccount(
        account_id=account_id,
        enabled=section.enabled and override.enabled,
        name=account_name(override.name, section.name, is_default),
        self_chat_mode=self_chat_mode,
        dm_policy=text(override.dm_policy) or text(section.dm_policy) or DEFAULT_DM_POLICY,
        allow_from=list(allow_from or []),
        auth_dir=auth_dir or str(default_auth_dir(account_id)),
    )


def web_auth_exists(auth_dir: str) -> Probe:
    """A session counts as linked once creds.json exists and parses."""
    creds = Path(auth_dir).expanduser() / CREDS_FILE
    try:
        if not creds.is_file():
            return Probe.MISSING
        json.loads(creds.read_text())
    except (OSError, ValueError) as e:
        logger.debug("whatsapp session probe failed for %s: %s", creds, e)
        return Probe.UNKNOWN
    return Probe.PRESENT


def get_web_auth_age_ms(auth_dir: str, now: float | None = None) -> int | None:
    creds = Path(auth_dir).expanduser() / CREDS_FILE
    try:
        mtime = creds.stat().st_mtime
    except (OSError, ValueError) as e:
        logger.debug("whatsapp session age unavailable for %s: %s", creds, e)
        return None
    now = time.time() if now is None else now
    return max(0, int((now - mtime) * 1000))


def read_web_self_id(auth_dir: str) -> str | None:
    """Linked number from creds.json, e.g. me.id '15551234567:12@s.whatsapp.net' -> '+15551234567'."""
    creds = Path(auth_dir).expanduser() / CREDS_FILE
    try:
        data = json.loads(creds.read_text())
    except (OSError, ValueError) as e:
        logger.debug("whatsapp self id unavailable for %s: %s", creds, e)
        return None
    me = data.get("me") if isinstance(data, dict) else None
    jid = me.get("id") if isinstance(me, dict) else None
    if not isinstance(jid, str):
        return None
    user = jid.split("@", 1)[0].split(":", 1)[0]
    return normalize_e164(user) or None


async def probe_session(account: WhatsAppAccount) -> WhatsAppAccount:
    probe = await asyncio.to_thread(web_auth_exists, account.auth_dir)
    if probe is not Probe.PRESENT:
        return account
    age_ms = await asyncio.to_thread(get_web_auth_age_ms, account.auth_dir)
    self_e164 = await asyncio.to_thread(read_web_self_id, account.auth_dir)
    return dataclasses.replace(account, linked=True, auth_age_ms=age_ms, self_e164=self_e164)


async def resolve_accounts(cfg: GatewayConfig) -> list[WhatsAppAccount]:
    accounts = []
    for account_id in list_account_ids(cfg):
        accounts.append(await probe_session(resolve_account(cfg, account_id)))
    return accounts
