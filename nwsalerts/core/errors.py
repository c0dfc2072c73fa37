"""Error raised when the alert feed cannot be loaded."""

FETCH_ERROR_MESSAGE = "Failed to load alerts. Please try again later."


class FetchError(Exception):
    """Any failure to load the feed: transport, HTTP status or bad body.

    The message shown to the user is always the same; the real cause is
    chained on ``__cause__`` and logged.
    """

    def __init__(self, message: str = FETCH_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message
