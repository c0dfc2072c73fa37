"""Main configuration data structure."""
from dataclasses import dataclass, field

from .display_config import DisplayConfig
from .feed_config import FeedConfig
from .logging_config import LoggingConfig


@dataclass
class Config:
    """Main configuration class."""
    feed: FeedConfig = field(default_factory=FeedConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
