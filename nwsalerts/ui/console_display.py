"""One-shot alert table printed with Rich."""
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..config.config import Config
from ..core.models import Phase
from ..core.view_store import ViewState
from .display_manager import TITLE_TEXT
from .table_rows import COLUMNS, build_rows, header_label


class ConsoleDisplay:
    """Prints a ViewState to the terminal without any interaction."""

    def __init__(self, config: Config, console: Optional[Console] = None):
        self.config = config
        self.console = console or Console(no_color=not config.display.show_colors)

    def show(self, state: ViewState) -> bool:
        """Print the view for ``state``; returns False for the error view."""
        if state.phase is Phase.ERROR:
            self.console.print(Text(state.error_message or "", style="bold red"))
            return False
        if state.phase is Phase.LOADING:
            self.console.print("Loading...")
            return True

        self.console.print(self._create_table(state))
        return True

    def _create_table(self, state: ViewState) -> Table:
        table = Table(
            title=TITLE_TEXT,
            title_style="bold blue",
            header_style="bold white on blue",
            show_lines=True,
            expand=True,
        )
        for column, label in COLUMNS:
            table.add_column(header_label(column, label, state), overflow="fold")

        for cells in build_rows(state, self.config.display):
            table.add_row(*cells)

        if state.filter_text:
            table.caption = f"severity contains '{state.filter_text}'"
        return table
