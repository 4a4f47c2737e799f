from collections.abc import Sequence

from ..core.models import DetailTable
from ..lib.phone import normalize_e164
from ..providers.whatsapp import WhatsAppAccount

__all__ = ["whatsapp_accounts_table"]

ALLOW_FROM_SHOWN = 3


def _account_label(account: WhatsAppAccount) -> str:
    name = (account.name or "").strip()
    return f"{account.account_id} ({name})" if name else account.account_id


def _notes(account: WhatsAppAccount) -> str:
    allow_from = [n for n in (normalize_e164(v) for v in account.allow_from) if n]
    notes: list[str] = []
    if not account.enabled:
        notes.append("disabled")
    if account.self_chat_mode:
        notes.append("self-chat")
    notes.append(f"dm:{account.dm_policy}")
    if allow_from:
        notes.append(f"allow:{','.join(allow_from[:ALLOW_FROM_SHOWN])}")
    return " · ".join(notes)


def whatsapp_accounts_table(accounts: Sequence[WhatsAppAccount]) -> DetailTable | None:
    if not accounts:
        return None
    return DetailTable(
        title="WhatsApp accounts",
        columns=["Account", "Status", "Notes"],
        rows=[
            {
                "Account": _account_label(account),
                "Status": "OK" if account.enabled else "OFF",
                "Notes": _notes(account),
            }
            for account in accounts
        ],
    )
