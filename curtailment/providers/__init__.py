# curtailment/providers/__init__.py
"""Factory of vendor standard level tables.

Each turbine vendor ships its own baseline curtailment levels. The function
**get(name)** returns a validated :class:`StandardLevelTable` by a string
alias, which lets stores be configured from config files or CLI arguments.
"""

from __future__ import annotations

from typing import List

from ..domain.errors import ConfigurationError
from ..domain.standard_levels import StandardLevelTable

_VENDORS = ("vestas",)


def available() -> List[str]:
    """Known vendor aliases."""
    return list(_VENDORS)


def get(name: str = "vestas") -> StandardLevelTable:
    """Return the standard level table of vendor *name*.

    Parameters
    ----------
    name : str
        Vendor alias, case-insensitive. Currently only ``"vestas"``.

    Raises
    ------
    ConfigurationError
        If the vendor is unknown.
    """
    if name.strip().lower() == "vestas":
        from .vestas import VESTAS_STANDARD_LEVELS

        return StandardLevelTable.from_mapping(VESTAS_STANDARD_LEVELS)

    raise ConfigurationError(f"Unknown turbine vendor '{name}'")
