"""Tests for the Textual alert table app."""
from rich.text import Text
from textual.widgets import DataTable, Input
from textual.widgets.data_table import ColumnKey

from nwsalerts.collectors.nws_feed import AlertFetcher
from nwsalerts.core.errors import FETCH_ERROR_MESSAGE
from nwsalerts.core.models import Phase, SortColumn, SortDirection
from nwsalerts.ui.display_manager import AlertsApp, HelpScreen, load_help_text
from nwsalerts.ui.table_rows import NO_ALERTS_TEXT
from tests.conftest import mock_transport


def make_app(config, **transport_kwargs) -> AlertsApp:
    return AlertsApp(config, AlertFetcher(config.feed, transport=mock_transport(**transport_kwargs)))


async def loaded(app, pilot):
    await app.workers.wait_for_complete()
    await pilot.pause()


def first_column(table: DataTable):
    return [table.get_row_at(i)[0].plain for i in range(table.row_count)]


async def test_loaded_feed_fills_table(config, feed_body):
    app = make_app(config, body=feed_body)
    async with app.run_test() as pilot:
        await loaded(app, pilot)
        table = app.query_one("#alerts_table", DataTable)
        assert app.store.state.phase is Phase.READY
        assert table.display
        assert not app.query_one("#status").display
        assert first_column(table) == [
            "Flood Warning for Harris County", "Tornado Warning", "Wind Advisory",
        ]


async def test_typing_filter_narrows_rows(config, feed_body):
    app = make_app(config, body=feed_body)
    async with app.run_test() as pilot:
        await loaded(app, pilot)
        app.query_one("#filter", Input).value = "EXT"
        await pilot.pause()
        table = app.query_one("#alerts_table", DataTable)
        assert app.store.state.filter_text == "EXT"
        assert first_column(table) == ["Tornado Warning"]


async def test_header_click_sorts_by_severity(config, feed_body):
    app = make_app(config, body=feed_body)
    async with app.run_test() as pilot:
        await loaded(app, pilot)
        table = app.query_one("#alerts_table", DataTable)
        for _ in range(2):
            table.post_message(DataTable.HeaderSelected(
                table, ColumnKey(SortColumn.SEVERITY.value), 1, Text("Severity")
            ))
            await pilot.pause()
        state = app.store.state
        assert (state.sort_column, state.sort_direction) == (SortColumn.SEVERITY, SortDirection.DESC)
        assert [table.get_row_at(i)[1].plain for i in range(table.row_count)] == [
            "Extreme", "Severe", "Minor",
        ]


async def test_empty_feed_shows_no_alerts_row(config):
    app = make_app(config, body={"features": []})
    async with app.run_test() as pilot:
        await loaded(app, pilot)
        table = app.query_one("#alerts_table", DataTable)
        assert table.row_count == 1
        assert table.get_row_at(0)[0].plain == NO_ALERTS_TEXT


async def test_http_error_shows_message_and_no_table(config):
    app = make_app(config, status=500)
    async with app.run_test() as pilot:
        await loaded(app, pilot)
        assert app.store.state.phase is Phase.ERROR
        assert app.store.state.error_message == FETCH_ERROR_MESSAGE
        assert app.query_one("#status").display
        assert not app.query_one("#alerts_table", DataTable).display
        assert not app.query_one("#filter", Input).display


async def test_store_closed_after_exit(config, feed_body):
    app = make_app(config, body=feed_body)
    async with app.run_test() as pilot:
        await loaded(app, pilot)
    assert app.store.closed


async def test_escape_leaves_filter_for_table(config, feed_body):
    app = make_app(config, body=feed_body)
    async with app.run_test() as pilot:
        await loaded(app, pilot)
        filter_input = app.query_one("#filter", Input)
        filter_input.focus()
        await pilot.press("e", "x", "t")
        await pilot.pause()
        assert app.store.state.filter_text == "ext"

        await pilot.press("escape")
        await pilot.pause()
        table = app.query_one("#alerts_table", DataTable)
        assert filter_input.value == ""
        assert app.store.state.filter_text == ""
        assert app.focused is table

        await pilot.press("h")
        await pilot.pause()
        assert isinstance(app.screen, HelpScreen)


async def test_keys_typed_into_filter_do_not_trigger_shortcuts(config, feed_body):
    app = make_app(config, body=feed_body)
    async with app.run_test() as pilot:
        await loaded(app, pilot)
        app.query_one("#filter", Input).focus()
        await pilot.press("h")
        await pilot.pause()
        assert not isinstance(app.screen, HelpScreen)
        assert app.store.state.filter_text == "h"


async def test_help_screen_closes_on_any_key(config, feed_body):
    app = make_app(config, body=feed_body)
    async with app.run_test() as pilot:
        await loaded(app, pilot)
        app.query_one("#alerts_table", DataTable).focus()
        await pilot.press("h")
        await pilot.pause()
        assert isinstance(app.screen, HelpScreen)
        await pilot.press("space")
        await pilot.pause()
        assert not isinstance(app.screen, HelpScreen)


def test_help_text_is_bundled():
    assert "Severity sorts Unknown < Minor" in load_help_text()


def test_help_text_falls_back_when_missing(tmp_path):
    assert "Click a header to sort" in load_help_text(str(tmp_path / "missing.txt"))
