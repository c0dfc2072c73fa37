"""Data structures for weather alerts and table sorting."""
from dataclasses import dataclass
from enum import Enum

# Ordered low to high; position is the sort rank.
SEVERITY_ORDER = ("Unknown", "Minor", "Moderate", "Severe", "Extreme")

DEFAULT_HEADLINE = "No Headline"
DEFAULT_DESCRIPTION = "No Description"
DEFAULT_SEVERITY = "Unknown"
DEFAULT_AREAS = "Unknown"


@dataclass(frozen=True)
class AlertRecord:
    """A single normalized weather alert."""
    id: str
    headline: str = DEFAULT_HEADLINE
    description: str = DEFAULT_DESCRIPTION
    severity: str = DEFAULT_SEVERITY
    areas: str = DEFAULT_AREAS


class SortColumn(str, Enum):
    """Table columns the user can sort by."""
    HEADLINE = "headline"
    SEVERITY = "severity"
    AREAS = "areas"
    DESCRIPTION = "description"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class Phase(str, Enum):
    """Lifecycle of the single feed load."""
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"
