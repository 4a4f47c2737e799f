from . import ansi
from ..core.models import State

__all__ = [
    "format_age",
    "format_state",
    "format_table",
]

_STATE_COLORS = {
    State.OK: ansi.green,
    State.WARN: ansi.yellow,
    State.SETUP: ansi.gold,
    State.OFF: ansi.muted,
}


def format_age(ms: int | float | None) -> str:
    """Format a duration in milliseconds as a compact age (e.g. '45s', '5m', '3h', '2d')."""
    if ms is None or ms < 0:
        return "unknown"
    s = int(ms // 1000)
    if s < 60:
        return f"{s}s"
    m = s // 60
    if m < 60:
        return f"{m}m"
    h = m // 60
    if h < 24:
        return f"{h}h"
    return f"{h // 24}d"


def format_state(state: State, color: bool = True) -> str:
    label = str(state).upper()
    if not color:
        return label
    return _STATE_COLORS[state](label)


def format_table(
    columns: list[str], rows: list[list[str]], color: bool = True, indent: str = "  "
) -> list[str]:
    """Align cells into columns. Widths ignore ANSI escapes so colored cells line up."""
    widths = [len(c) for c in columns]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(ansi.strip(cell)))

    def _line(cells: list[str]) -> str:
        padded = [
            cell + " " * (widths[i] - len(ansi.strip(cell))) for i, cell in enumerate(cells)
        ]
        return (indent + "  ".join(padded)).rstrip()

    header = [ansi.bold(c) for c in columns] if color else list(columns)
    lines = [_line(header)]
    lines.extend(_line(row) for row in rows)
    return lines
