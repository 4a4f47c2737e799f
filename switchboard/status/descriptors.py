"""Per-provider classification data, in report order."""

from operator import attrgetter

from ..lib.format import format_age
from .classify import Credential, Extra, ProviderDescriptor
from .tables import whatsapp_accounts_table

__all__ = [
    "DISCORD",
    "IMESSAGE",
    "MSTEAMS",
    "SIGNAL",
    "SLACK",
    "TELEGRAM",
    "WHATSAPP",
]

WHATSAPP = ProviderDescriptor(
    name="WhatsApp",
    ready=attrgetter("linked"),
    extras=(
        Extra("self_e164", " {}"),
        Extra("auth_age_ms", " · auth {}", format_age),
    ),
    ok="linked{extras} · accounts {ready}/{total}",
    setup="not linked (pair a device under WhatsApp → Settings → Linked Devices)",
    table=whatsapp_accounts_table,
)

TELEGRAM = ProviderDescriptor(
    name="Telegram",
    credentials=(Credential("token", "botToken", hint=True),),
    files=("token_file",),
    ok="bot token {token.sources} ({token.hint}) · accounts {ready}/{total}",
    missing_file="token file missing ({path}{more})",
    setup="no bot token (TELEGRAM_BOT_TOKEN / telegram.botToken)",
)

DISCORD = ProviderDescriptor(
    name="Discord",
    credentials=(Credential("token", "token", hint=True),),
    ok="bot token {token.sources} ({token.hint}) · accounts {ready}/{total}",
    setup="no bot token (DISCORD_BOT_TOKEN / discord.token)",
)

SLACK = ProviderDescriptor(
    name="Slack",
    credentials=(
        Credential("bot_token", "botToken", hint=True),
        Credential("app_token", "appToken", hint=True),
    ),
    ok=(
        "tokens ok (bot {bot_token.sources} {bot_token.hint}, "
        "app {app_token.sources} {app_token.hint}) · accounts {ready}/{total}"
    ),
    partial="partial tokens (need bot+app) · accounts {partial}/{total}",
    setup="no tokens (SLACK_BOT_TOKEN + SLACK_APP_TOKEN)",
)

SIGNAL = ProviderDescriptor(
    name="Signal",
    ready=attrgetter("configured"),
    extras=(Extra("base_url", " · baseUrl {}"),),
    ok="configured{extras} · accounts {ready}/{total}",
    setup="default config (no overrides)",
)

IMESSAGE = ProviderDescriptor(
    name="iMessage",
    ready=attrgetter("configured"),
    extras=(
        Extra("cli_path", " · cliPath {}"),
        Extra("db_path", " · dbPath {}"),
    ),
    ok="configured{extras} · accounts {ready}/{total}",
    setup="default config (no overrides)",
)

MSTEAMS = ProviderDescriptor(
    name="MS Teams",
    ready=attrgetter("credentials"),
    credentials=(
        Credential("app_id", "appId"),
        Credential("app_password", "appPassword", hint=True),
        Credential("tenant_id", "tenantId"),
    ),
    ok="credentials set (password {app_password.hint}) · sources {sources} · accounts {ready}/{total}",
    partial="credentials incomplete (missing {missing})",
    setup=(
        "no credentials (missing {missing}; "
        "set MSTEAMS_APP_ID / MSTEAMS_APP_PASSWORD / MSTEAMS_TENANT_ID)"
    ),
)
