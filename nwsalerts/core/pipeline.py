"""Filter and sort pipeline that turns the fetched alerts into table rows.

Everything here is a pure function of its arguments so the displayed list
can be rebuilt from scratch whenever an input changes.
"""
import locale
from typing import Iterable, Tuple

from .models import SEVERITY_ORDER, AlertRecord, SortColumn, SortDirection

# Rank for severities outside SEVERITY_ORDER: sorts before "Unknown".
UNRANKED_SEVERITY = -1


def severity_rank(severity: str) -> int:
    """Position of ``severity`` in the vocabulary, or UNRANKED_SEVERITY."""
    try:
        return SEVERITY_ORDER.index(severity)
    except ValueError:
        return UNRANKED_SEVERITY


def matches_filter(record: AlertRecord, filter_text: str) -> bool:
    """Case-insensitive substring match against the severity field only."""
    return filter_text.lower() in record.severity.lower()


def _text_key(value: str) -> str:
    return locale.strxfrm(value.casefold())


def sort_key(column: SortColumn):
    """Key function for sorting records by ``column``."""
    if column is SortColumn.SEVERITY:
        return lambda record: severity_rank(record.severity)
    attr = column.value
    return lambda record: _text_key(getattr(record, attr))


def derive(
    full_list: Iterable[AlertRecord],
    filter_text: str,
    sort_column: SortColumn,
    sort_direction: SortDirection,
) -> Tuple[AlertRecord, ...]:
    """Build the displayed list: filter on severity, then stable sort."""
    kept = [record for record in full_list if matches_filter(record, filter_text)]
    # sorted() stays stable with reverse=True, equal keys keep input order
    return tuple(sorted(
        kept,
        key=sort_key(sort_column),
        reverse=sort_direction is SortDirection.DESC,
    ))


def toggle_sort(
    current_column: SortColumn,
    current_direction: SortDirection,
    clicked: SortColumn,
) -> Tuple[SortColumn, SortDirection]:
    """New sort settings after a click on the ``clicked`` header."""
    if clicked is current_column:
        return current_column, current_direction.flipped()
    return clicked, SortDirection.ASC
