import dataclasses
from enum import Enum, StrEnum
from typing import Any


class State(StrEnum):
    OK = "ok"
    SETUP = "setup"
    WARN = "warn"
    OFF = "off"


class Probe(Enum):
    """Outcome of a best-effort filesystem or session probe.

    UNKNOWN means the probe itself failed. Callers that have nothing to probe
    use None instead.
    """

    PRESENT = "present"
    MISSING = "missing"
    UNKNOWN = "unknown"


@dataclasses.dataclass(frozen=True)
class ProviderRow:
    provider: str
    enabled: bool
    state: State
    detail: str


@dataclasses.dataclass(frozen=True)
class DetailTable:
    title: str
    columns: list[str]
    rows: list[dict[str, str]] = dataclasses.field(default_factory=list, hash=False)


@dataclasses.dataclass(frozen=True)
class SourceSummary:
    label: str
    parts: list[str] = dataclasses.field(default_factory=list, hash=False)


@dataclasses.dataclass(frozen=True)
class Report:
    rows: list[ProviderRow] = dataclasses.field(default_factory=list, hash=False)
    details: list[DetailTable] = dataclasses.field(default_factory=list, hash=False)

    def row(self, provider: str) -> ProviderRow | None:
        return next((row for row in self.rows if row.provider == provider), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "rows": [
                {
                    "provider": row.provider,
                    "enabled": row.enabled,
                    "state": str(row.state),
                    "detail": row.detail,
                }
                for row in self.rows
            ],
            "details": [dataclasses.asdict(table) for table in self.details],
        }
