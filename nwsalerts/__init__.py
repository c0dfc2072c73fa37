"""Terminal viewer for active National Weather Service alerts."""

__version__ = "0.1.0"
