# curtailment/providers/vestas.py
"""Standard curtailment levels for Vestas turbines, as given by the operator."""

from ..domain.categories import CurtailmentCategory

VESTAS_STANDARD_LEVELS = {
    CurtailmentCategory.DEFAULT: 0.0,
    CurtailmentCategory.NOISE: 0.25,
    CurtailmentCategory.BATS: 0.15,
    CurtailmentCategory.SHADOW: 0.10,
    CurtailmentCategory.BOAT_ACTION: 0.05,
    CurtailmentCategory.TECHNICAL: 0.05,
    CurtailmentCategory.GRID: 0.05,
}
