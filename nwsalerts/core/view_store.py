"""View state and the store that owns it."""
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, List, Optional, Tuple

import structlog

from .models import AlertRecord, Phase, SortColumn, SortDirection
from .pipeline import derive, toggle_sort

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ViewState:
    """Everything the table view shows.

    ``displayed_list`` is always derived from the other inputs when the
    state is built and cannot be set directly.
    """
    full_list: Tuple[AlertRecord, ...] = ()
    filter_text: str = ""
    sort_column: SortColumn = SortColumn.HEADLINE
    sort_direction: SortDirection = SortDirection.ASC
    phase: Phase = Phase.LOADING
    error_message: Optional[str] = None
    displayed_list: Tuple[AlertRecord, ...] = field(init=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "displayed_list", derive(
            self.full_list, self.filter_text, self.sort_column, self.sort_direction
        ))


StateListener = Callable[[ViewState], None]


class ViewStore:
    """Holds the current ViewState and notifies listeners on every change.

    Each public method performs one transition: a new ViewState replaces
    the old one and every listener is called once with it.
    """

    def __init__(self, initial: Optional[ViewState] = None):
        self._state = initial if initial is not None else ViewState()
        self._listeners: List[StateListener] = []
        self._closed = False

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_filter(self, text: str):
        self._transition(filter_text=text)

    def click_header(self, column):
        """Apply a header click to the sort column and direction."""
        column, direction = toggle_sort(
            self._state.sort_column, self._state.sort_direction, SortColumn(column)
        )
        self._transition(sort_column=column, sort_direction=direction)

    def load_succeeded(self, records: Iterable[AlertRecord]):
        """Replace the full list wholesale with a fresh fetch result."""
        self._transition(
            full_list=tuple(records), phase=Phase.READY, error_message=None
        )

    def load_failed(self, message: str):
        """Drop any loaded alerts and show ``message`` instead."""
        self._transition(full_list=(), phase=Phase.ERROR, error_message=message)

    def close(self):
        """Stop accepting transitions, e.g. once the view is torn down."""
        self._closed = True
        self._listeners.clear()

    def _transition(self, **changes):
        if self._closed:
            logger.debug("transition_dropped", reason="store closed", fields=sorted(changes))
            return
        new_state = replace(self._state, **changes)
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
