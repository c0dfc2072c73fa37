"""Shared fixtures for nwsalerts tests."""
import httpx
import pytest

from nwsalerts.config.config import Config
from nwsalerts.config.feed_config import FeedConfig
from nwsalerts.core.models import AlertRecord

FEED_URL = "https://alerts.test/alerts/active"


def make_record(id, severity="Unknown", headline="No Headline", areas="Unknown",
                description="No Description") -> AlertRecord:
    return AlertRecord(id=id, headline=headline, description=description,
                       severity=severity, areas=areas)


def make_feature(id, **properties) -> dict:
    return {"id": id, "type": "Feature", "properties": properties}


def mock_transport(status=200, body=None, raw=None):
    """httpx transport answering every request with one canned response."""
    def handler(request):
        if raw is not None:
            return httpx.Response(status, content=raw)
        return httpx.Response(status, json=body if body is not None else {"features": []})
    return httpx.MockTransport(handler)


@pytest.fixture
def feed_config():
    return FeedConfig(url=FEED_URL, user_agent="nwsalerts-tests")


@pytest.fixture
def config(feed_config):
    return Config(feed=feed_config)


@pytest.fixture
def feed_body():
    return {
        "type": "FeatureCollection",
        "features": [
            make_feature("urn:1", headline="Flood Warning for Harris County",
                         description="River flooding expected.",
                         severity="Severe", areaDesc="Harris, TX"),
            make_feature("urn:2", headline="Wind Advisory",
                         description="Gusts to 45 mph.",
                         severity="Minor", areaDesc="Cook, IL"),
            make_feature("urn:3", headline="Tornado Warning",
                         description="Take shelter now.",
                         severity="Extreme", areaDesc="Tulsa, OK"),
        ],
    }


@pytest.fixture
def records():
    return [
        make_record("a", severity="Severe", headline="Bravo", areas="Texas"),
        make_record("b", severity="Minor", headline="alpha", areas="ohio"),
        make_record("c", severity="Extreme", headline="Charlie", areas="Maine"),
        make_record("d", severity="Moderate", headline="delta", areas="Idaho"),
        make_record("e", severity="Unknown", headline="Echo", areas="Utah"),
    ]
