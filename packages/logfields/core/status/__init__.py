"""Configuration status channel for logfields.

Setup problems are reported through a ``StatusReporter`` rather than
raised, keeping them out of the event data path.
"""

from .models import Status, StatusLevel
from .protocol import StatusReporter
from .reporters import LoggingStatusReporter, NullStatusReporter, StatusCollector

__all__ = [
    # Protocol
    "StatusReporter",
    # Implementations
    "LoggingStatusReporter",
    "StatusCollector",
    "NullStatusReporter",
    # Models
    "Status",
    "StatusLevel",
]
