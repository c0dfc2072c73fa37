"""Display configuration data structure."""
from dataclasses import dataclass, field
from typing import Dict

from ..core.models import SortColumn, SortDirection

DEFAULT_SEVERITY_STYLES = {
    "Extreme": "bold red3",
    "Severe": "bold red",
    "Moderate": "bold yellow",
    "Minor": "bold green",
}
NEUTRAL_SEVERITY_STYLE = "bold grey70"


@dataclass
class DisplayConfig:
    """Display preferences configuration."""
    show_colors: bool = True
    default_sort_column: SortColumn = SortColumn.HEADLINE
    default_sort_direction: SortDirection = SortDirection.ASC
    max_cell_width: int = 60
    max_description_width: int = 80
    severity_styles: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SEVERITY_STYLES))
    neutral_style: str = NEUTRAL_SEVERITY_STYLE

    def __post_init__(self):
        """Fix invalid values; unknown sort settings raise ValueError."""
        self.default_sort_column = SortColumn(self.default_sort_column)
        self.default_sort_direction = SortDirection(self.default_sort_direction)
        if self.max_cell_width <= 0:
            self.max_cell_width = 60
        if self.max_description_width <= 0:
            self.max_description_width = 80
