"""Generic provider classifier.

Each provider is described by a ProviderDescriptor: which account fields are
credentials, which are declared file paths, what makes an account ready, and
the detail templates for each state. classify() applies the same precedence to
every provider: off, then warn (missing files, partial credentials), then ok,
then setup.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from ..core.models import DetailTable, Probe, ProviderRow, State
from .hints import format_token_hint
from .probe import path_exists
from .sources import summarize_sources

__all__ = [
    "Classification",
    "Credential",
    "CredentialView",
    "Extra",
    "ProviderDescriptor",
    "classify",
]


@dataclass(frozen=True)
class Credential:
    field: str
    key: str
    hint: bool = False


@dataclass(frozen=True)
class Extra:
    field: str
    template: str
    render: Callable[[Any], str] = str


@dataclass(frozen=True)
class CredentialView:
    sources: str
    hint: str


@dataclass(frozen=True)
class ProviderDescriptor:
    name: str
    ok: str
    setup: str
    credentials: tuple[Credential, ...] = ()
    ready: Callable[[Any], bool] | None = None
    files: tuple[str, ...] = ()
    extras: tuple[Extra, ...] = ()
    partial: str = "credentials incomplete (missing {missing}) · accounts {partial}/{total}"
    missing_file: str = "file missing ({path}{more})"
    table: Callable[[Sequence[Any]], DetailTable | None] | None = None


@dataclass(frozen=True)
class Classification:
    row: ProviderRow
    table: DetailTable | None = None


@dataclass(frozen=True)
class _Assessment:
    account: Any
    missing: tuple[str, ...]
    missing_files: tuple[str, ...]
    partial: bool
    ready: bool


def _value(account: Any, name: str) -> str:
    value = getattr(account, name, None)
    return str(value).strip() if value is not None else ""


def _assess(descriptor: ProviderDescriptor, account: Any) -> _Assessment:
    creds = descriptor.credentials
    missing = tuple(c.key for c in creds if not _value(account, c.field))
    missing_files = tuple(
        getattr(account, f"{name}_key", None) or name
        for name in descriptor.files
        if path_exists(getattr(account, name, None)) is Probe.MISSING
    )
    ready = not missing and (descriptor.ready is None or bool(descriptor.ready(account)))
    return _Assessment(
        account=account,
        missing=missing,
        missing_files=missing_files,
        partial=len(creds) > 1 and 0 < len(missing) < len(creds),
        ready=ready,
    )


def _extras(descriptor: ProviderDescriptor, account: Any) -> str:
    parts = []
    for extra in descriptor.extras:
        value = getattr(account, extra.field, None)
        if not value or not str(value).strip():
            continue
        parts.append(extra.template.format(extra.render(value)))
    return "".join(parts)


def _ok_context(
    descriptor: ProviderDescriptor, ready: list[_Assessment], total: int, show_secrets: bool
) -> dict[str, Any]:
    sample = ready[0].account
    context: dict[str, Any] = {
        "ready": len(ready),
        "total": total,
        "extras": _extras(descriptor, sample),
        "sources": summarize_sources(
            getattr(a.account, f"{c.field}_source", None)
            for a in ready
            for c in descriptor.credentials
        ).label,
    }
    for cred in descriptor.credentials:
        sources = summarize_sources(getattr(a.account, f"{cred.field}_source", None) for a in ready)
        hint = (
            format_token_hint(_value(sample, cred.field), show_secrets=show_secrets)
            if cred.hint
            else ""
        )
        context[cred.field] = CredentialView(sources=sources.label, hint=hint)
    return context


def classify(
    descriptor: ProviderDescriptor,
    enabled: bool,
    accounts: Sequence[Any],
    *,
    show_secrets: bool = False,
) -> Classification:
    """Turn resolved accounts into one status row (and an optional drill-down table)."""
    if not enabled:
        return Classification(ProviderRow(descriptor.name, False, State.OFF, "disabled"))

    assessed = [_assess(descriptor, a) for a in accounts if a.enabled]
    total = max(1, len(assessed))
    issues = list(dict.fromkeys(path for a in assessed for path in a.missing_files))
    partial = [a for a in assessed if a.partial]
    ready = [a for a in assessed if a.ready]

    if issues:
        state = State.WARN
        more = f", +{len(issues) - 1} more" if len(issues) > 1 else ""
        detail = descriptor.missing_file.format(path=issues[0], more=more)
    elif partial:
        state = State.WARN
        detail = descriptor.partial.format(
            partial=len(partial), total=total, missing=", ".join(partial[0].missing)
        )
    elif ready:
        state = State.OK
        detail = descriptor.ok.format(**_ok_context(descriptor, ready, total, show_secrets))
    else:
        state = State.SETUP
        detail = descriptor.setup.format(missing=", ".join(c.key for c in descriptor.credentials))

    table = descriptor.table(accounts) if descriptor.table and ready else None
    return Classification(ProviderRow(descriptor.name, True, state, detail), table)
