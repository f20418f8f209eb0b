# curtailment/domain/errors.py
"""Error hierarchy of the curtailment store.

Every error derives from ``ValueError``: all of them describe bad input or
bad configuration, never a transient condition, so nothing is retried.
"""

from __future__ import annotations


class CurtailmentError(ValueError):
    """Base class for all curtailment errors."""


class InvalidLevelError(CurtailmentError):
    """A level outside ``[0.0, 1.0]`` (or not a number) was supplied."""


class ConfigurationError(CurtailmentError):
    """The standard level table (or a vendor name) is unusable."""


class UnknownCategoryError(ConfigurationError):
    """A category that the standard table does not know about."""


class InvalidTimestampError(CurtailmentError):
    """A timestamp that cannot be ordered (NaN compares unequal to itself)."""
