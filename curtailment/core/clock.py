# curtailment/core/clock.py

from datetime import datetime, timezone
from typing import Any, Protocol


class Clock(Protocol):
    """A minimal interface for the wall clock, so tests can inject a fake one.
    Any zero-argument callable returning a comparable timestamp qualifies.
    """

    def __call__(self) -> Any:
        ...


def utc_now() -> datetime:
    """Current instant as a timezone-aware UTC ``datetime``."""
    return datetime.now(timezone.utc)


def normalize_timestamp(ts: Any) -> Any:
    """Treat naive ``datetime`` values as UTC; leave everything else as is."""
    if isinstance(ts, datetime) and ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts
