"""Single-shot collector that loads the feed into the view store."""
import structlog

from ..core.errors import FetchError
from ..core.view_store import ViewStore
from .nws_feed import AlertFetcher

logger = structlog.get_logger(__name__)


class AlertCollector:
    """Runs the fetcher once and hands the outcome to the store."""

    def __init__(self, fetcher: AlertFetcher, store: ViewStore):
        self.fetcher = fetcher
        self.store = store
        self.started = False

    async def collect(self):
        """Load alerts; only the first call does anything."""
        if self.started:
            return
        self.started = True

        try:
            records = await self.fetcher.fetch_alerts()
        except FetchError as error:
            if self.store.closed:
                logger.debug("stale_fetch_dropped", outcome="error")
                return
            self.store.load_failed(str(error))
            return

        if self.store.closed:
            logger.debug("stale_fetch_dropped", outcome="ok", count=len(records))
            return
        self.store.load_succeeded(records)
        logger.info("alerts_loaded", count=len(records))
