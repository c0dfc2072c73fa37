"""Column layout, severity colours and row building shared by both displays."""
from typing import List, Tuple

from rich.text import Text

from ..config.display_config import DisplayConfig
from ..core.models import AlertRecord, SortColumn, SortDirection
from ..core.view_store import ViewState

COLUMNS: Tuple[Tuple[SortColumn, str], ...] = (
    (SortColumn.HEADLINE, "Headline"),
    (SortColumn.SEVERITY, "Severity"),
    (SortColumn.AREAS, "Affected Areas"),
    (SortColumn.DESCRIPTION, "Description"),
)

NO_ALERTS_TEXT = "No active alerts."
SORT_ARROWS = {SortDirection.ASC: "▲", SortDirection.DESC: "▼"}


class SeverityColors:
    """Maps severities to Rich styles using the display configuration."""

    def __init__(self, config: DisplayConfig):
        self.config = config

    def style_for(self, severity: str) -> str:
        if not self.config.show_colors:
            return ""
        return self.config.severity_styles.get(severity, self.config.neutral_style)


def header_label(column: SortColumn, label: str, state: ViewState) -> str:
    """Column title, with an arrow on the active sort column."""
    if column is state.sort_column:
        return f"{label} {SORT_ARROWS[state.sort_direction]}"
    return label


def truncate(value: str, width: int) -> str:
    """Shorten ``value`` to ``width`` characters for display."""
    value = " ".join(value.split())
    if len(value) > width:
        if width <= 3:
            return value[:max(width, 0)]
        return value[:width - 3] + "..."
    return value


def record_cells(record: AlertRecord, config: DisplayConfig, colors: SeverityColors) -> Tuple[Text, ...]:
    width = config.max_cell_width
    return (
        Text(truncate(record.headline, width)),
        Text(record.severity, style=colors.style_for(record.severity)),
        Text(truncate(record.areas, width)),
        Text(truncate(record.description, config.max_description_width)),
    )


def build_rows(state: ViewState, config: DisplayConfig) -> List[Tuple[Text, ...]]:
    """Table body for ``state.displayed_list``, in order.

    An empty list gives one row carrying the "No active alerts." message
    across the full table width.
    """
    if not state.displayed_list:
        blanks = tuple(Text("") for _ in COLUMNS[1:])
        return [(Text(NO_ALERTS_TEXT, style="bold"),) + blanks]

    colors = SeverityColors(config)
    return [record_cells(record, config, colors) for record in state.displayed_list]
