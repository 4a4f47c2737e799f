import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from ..config import GatewayConfig
from ..core.models import Report
from ..providers import discord, imessage, msteams, signal, slack, telegram, whatsapp
from . import descriptors
from .classify import ProviderDescriptor, classify

__all__ = ["PROVIDERS", "build_providers_table"]

logger = logging.getLogger(__name__)

Loader = Callable[[GatewayConfig], Sequence[Any] | Awaitable[Sequence[Any]]]

PROVIDERS: tuple[tuple[ProviderDescriptor, Callable[[GatewayConfig], bool], Loader], ...] = (
    (descriptors.WHATSAPP, whatsapp.is_enabled, whatsapp.resolve_accounts),
    (descriptors.TELEGRAM, telegram.is_enabled, telegram.resolve_accounts),
    (descriptors.DISCORD, discord.is_enabled, discord.resolve_accounts),
    (descriptors.SLACK, slack.is_enabled, slack.resolve_accounts),
    (descriptors.SIGNAL, signal.is_enabled, signal.resolve_accounts),
    (descriptors.IMESSAGE, imessage.is_enabled, imessage.resolve_accounts),
    (descriptors.MSTEAMS, msteams.is_enabled, msteams.resolve_accounts),
)


async def _load(loader: Loader, cfg: GatewayConfig) -> Sequence[Any]:
    accounts = loader(cfg)
    if inspect.isawaitable(accounts):
        accounts = await accounts
    return accounts


async def build_providers_table(cfg: GatewayConfig, *, show_secrets: bool = False) -> Report:
    """Classify every provider in fixed order. Disabled providers are not probed."""
    report = Report()
    for descriptor, is_enabled, loader in PROVIDERS:
        enabled = is_enabled(cfg)
        accounts = await _load(loader, cfg) if enabled else []
        result = classify(descriptor, enabled, accounts, show_secrets=show_secrets)
        logger.debug("%s: %s (%s)", descriptor.name, result.row.state, result.row.detail)
        report.rows.append(result.row)
        if result.table is not None and result.table.rows:
            report.details.append(result.table)
    return report
