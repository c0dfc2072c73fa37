"""NWS active-alerts feed client.

Fetches ``https://api.weather.gov/alerts/active`` (GeoJSON) and maps each
feature's ``properties`` onto an :class:`AlertRecord`. Missing, null or
non-string properties fall back to the record defaults so the table never
has to deal with absent values.
"""
from typing import Any, List, Optional

import httpx
import structlog

from ..config.feed_config import FeedConfig
from ..core.errors import FetchError
from ..core.models import (
    DEFAULT_AREAS,
    DEFAULT_DESCRIPTION,
    DEFAULT_HEADLINE,
    DEFAULT_SEVERITY,
    AlertRecord,
)

logger = structlog.get_logger(__name__)


def _text(props: dict, key: str, default: str) -> str:
    value = props.get(key)
    return value if isinstance(value, str) else default


def normalize_feature(feature: Any) -> AlertRecord:
    """Build an AlertRecord from one GeoJSON feature, substituting defaults."""
    if not isinstance(feature, dict):
        return AlertRecord(id="")

    props = feature.get("properties")
    if not isinstance(props, dict):
        props = {}

    alert_id = feature.get("id")
    if not isinstance(alert_id, str):
        alert_id = _text(props, "id", "")

    return AlertRecord(
        id=alert_id,
        headline=_text(props, "headline", DEFAULT_HEADLINE),
        description=_text(props, "description", DEFAULT_DESCRIPTION),
        severity=_text(props, "severity", DEFAULT_SEVERITY),
        areas=_text(props, "areaDesc", DEFAULT_AREAS),
    )


def parse_feed(body: Any) -> List[AlertRecord]:
    """Normalize a decoded feed body; raises ValueError if it has no feature list."""
    if not isinstance(body, dict):
        raise ValueError("feed body is not a JSON object")
    features = body.get("features")
    if not isinstance(features, list):
        raise ValueError("feed body has no 'features' list")
    return [normalize_feature(feature) for feature in features]


class AlertFetcher:
    """Loads the active alert list from the configured feed URL."""

    def __init__(self, config: FeedConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """``transport`` lets tests swap in an ``httpx.MockTransport``."""
        self.config = config
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers={
                "User-Agent": self.config.user_agent,
                "Accept": "application/geo+json",
            },
            timeout=self.config.timeout,
            transport=self.transport,
        )

    async def fetch_alerts(self) -> List[AlertRecord]:
        """Fetch and normalize all active alerts.

        Raises:
            FetchError: on any transport error, non-2xx status or a body
                that is not a feature collection.
        """
        url = self.config.url
        logger.debug("fetching_alerts", url=url)
        try:
            async with self._client() as client:
                response = await client.get(url)
                response.raise_for_status()
                records = parse_feed(response.json())
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("alert_fetch_failed", url=url, error=str(exc), exc_info=True)
            raise FetchError() from exc

        logger.info("alerts_fetched", url=url, count=len(records))
        return records
