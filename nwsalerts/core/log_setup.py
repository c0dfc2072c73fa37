"""structlog configuration.

While the Textual UI is running it owns the terminal, so logs normally go
to a file. Without one they go to stderr.
"""
import logging
import sys
from typing import Optional, TextIO

import structlog


def configure_logging(level: str = "INFO", log_file: str = "") -> Optional[TextIO]:
    """Configure structlog once for the whole process.

    Returns the opened log file (caller closes it), or None for stderr.
    """
    stream = open(log_file, "a", encoding="utf-8") if log_file else None

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(
                key_order=["timestamp", "level", "event"], drop_missing=True
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )
    return stream
