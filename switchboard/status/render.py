from ..core.models import DetailTable, Report
from ..lib import ansi
from ..lib.format import format_state, format_table

__all__ = ["render_report"]

PROVIDER_COLUMNS = ["Provider", "Enabled", "State", "Detail"]


def _title(text: str, color: bool) -> str:
    return ansi.bold(text) if color else text


def _render_detail(table: DetailTable, color: bool) -> list[str]:
    rows = [[row.get(column, "") for column in table.columns] for row in table.rows]
    return ["", _title(table.title, color), *format_table(table.columns, rows, color=color)]


def render_report(report: Report, color: bool = True) -> str:
    rows = [
        [
            row.provider,
            "yes" if row.enabled else "no",
            format_state(row.state, color=color),
            row.detail,
        ]
        for row in report.rows
    ]
    lines = [_title("Providers", color), *format_table(PROVIDER_COLUMNS, rows, color=color)]
    for table in report.details:
        lines.extend(_render_detail(table, color))
    return "\n".join(lines)
