"""Interactive alert table using Textual."""
import os

from rich.text import Text
from textual.app import App
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import DataTable, Input, Static

from ..collectors.alert_collector import AlertCollector
from ..collectors.nws_feed import AlertFetcher
from ..config.config import Config
from ..core.models import Phase
from ..core.view_store import ViewState, ViewStore
from .table_rows import COLUMNS, build_rows, header_label

TITLE_TEXT = "National Weather Alerts by NWS"
LOADING_TEXT = "Loading..."
HELP_FILE = os.path.join(os.path.dirname(__file__), "help.txt")


def load_help_text(path: str = HELP_FILE) -> str:
    """Contents of the bundled help file, or a one-line summary if unreadable."""
    try:
        with open(path, "r") as f:
            return f.read().strip()
    except OSError:
        return "Type to filter by severity. Click a header to sort. x=exit"


class HelpScreen(ModalScreen):
    """Keyboard and sorting reference; any key closes it."""

    def compose(self):
        with Vertical(id="help_dialog"):
            yield Static(load_help_text(), id="help_text")
            yield Static("any key closes", id="help_hint")

    def on_key(self, event):
        event.stop()
        self.dismiss()


class AlertsApp(App):
    """Fetches the alert feed once and shows it as a sortable table."""

    CSS_PATH = "alerts.tcss"

    def __init__(self, config: Config, fetcher: AlertFetcher):
        super().__init__()
        self.config = config
        self.store = ViewStore(ViewState(
            sort_column=config.display.default_sort_column,
            sort_direction=config.display.default_sort_direction,
        ))
        self.collector = AlertCollector(fetcher, self.store)

    def compose(self):
        with Vertical():
            yield Static(TITLE_TEXT, id="header")
            yield Input(placeholder="Filter by severity...", id="filter")
            yield Static(LOADING_TEXT, id="status")
            yield DataTable(id="alerts_table", zebra_stripes=True, cursor_type="row")
            yield Static("", id="summary")
            yield Static(self._create_help_panel(), id="help")

    def on_mount(self):
        """Render the loading view and start the one-off feed fetch."""
        self.store.subscribe(self._update_display)
        self._update_display(self.store.state)
        self.run_worker(self.collector.collect(), name="fetch_alerts", exclusive=True)

    def on_unmount(self):
        # A fetch finishing after teardown must not touch the view
        self.store.close()

    def on_key(self, event):
        """Handle key press events."""
        if event.key == "escape":
            # Leave the filter box for the table
            self.query_one("#filter", Input).value = ""
            table = self.query_one("#alerts_table", DataTable)
            if table.display:
                table.focus()
            return
        if isinstance(self.focused, Input):
            return
        if event.key == "x" or event.key == "q":
            self.exit()
        elif event.key == "h":
            self.push_screen(HelpScreen())

    def on_input_changed(self, event: Input.Changed):
        if event.input.id == "filter":
            self.store.set_filter(event.value)

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected):
        self.store.click_header(event.column_key.value)

    def _update_display(self, state: ViewState):
        """Show exactly one of the loading, error or table views."""
        status = self.query_one("#status", Static)
        filter_input = self.query_one("#filter", Input)
        table = self.query_one("#alerts_table", DataTable)
        summary = self.query_one("#summary", Static)

        ready = state.phase is Phase.READY
        filter_input.display = ready
        table.display = ready
        summary.display = ready
        status.display = not ready

        if state.phase is Phase.LOADING:
            status.update(LOADING_TEXT)
        elif state.phase is Phase.ERROR:
            status.update(Text(state.error_message or "", style="bold red"))
        else:
            self._update_alerts_table(table, state)
            summary.update(f"Showing {len(state.displayed_list)} of {len(state.full_list)} alerts")

    def _update_alerts_table(self, table: DataTable, state: ViewState):
        """Rebuild headers and rows from the derived list."""
        table.clear(columns=True)
        for column, label in COLUMNS:
            table.add_column(header_label(column, label, state), key=column.value)
        for cells in build_rows(state, self.config.display):
            table.add_row(*cells)

    def _create_help_panel(self) -> str:
        """Create help panel content with keyboard shortcuts."""
        return "Sort: click a header; Clear filter and leave it: esc; Help: h; Exit: x or q"
