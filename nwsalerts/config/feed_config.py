"""Alert feed configuration."""
from dataclasses import dataclass
from typing import Optional

NWS_ACTIVE_ALERTS_URL = "https://api.weather.gov/alerts/active"


@dataclass
class FeedConfig:
    """Where and how to fetch the alert feed."""
    url: str = NWS_ACTIVE_ALERTS_URL
    user_agent: str = "nwsalerts"
    timeout: Optional[float] = None  # seconds, None waits forever

    def __post_init__(self):
        """Fix invalid values."""
        if not self.url:
            self.url = NWS_ACTIVE_ALERTS_URL
        if not self.user_agent:
            self.user_agent = "nwsalerts"
        if self.timeout is not None and self.timeout <= 0:
            self.timeout = None
