"""Configuration loading and management."""
import os

import yaml

from .config import Config
from .display_config import DEFAULT_SEVERITY_STYLES, DisplayConfig
from .feed_config import FeedConfig
from .logging_config import LoggingConfig

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")


class ConfigManager:
    """Configuration loading and management."""

    @staticmethod
    def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Config:
        """Load configuration from YAML file - let it crash if bad."""
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        feed = FeedConfig(**(config_data.get('feed') or {}))

        # Severity styles merge over the built-in grading
        display_data = dict(config_data.get('display') or {})
        styles = dict(DEFAULT_SEVERITY_STYLES)
        styles.update(display_data.pop('severity_styles', None) or {})
        display = DisplayConfig(severity_styles=styles, **display_data)

        logging_config = LoggingConfig(**(config_data.get('logging') or {}))

        return Config(feed=feed, display=display, logging=logging_config)
