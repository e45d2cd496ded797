"""
Unit conversion helpers for IGC Flight Log.
"""

import math

from ..config.constants import FEET_PER_METER


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2).

    Python's round() uses banker's rounding, which would shift altitudes
    and climb rates that land exactly on .5.
    """
    return int(math.floor(value + 0.5))


def meters_to_feet(meters: float) -> int:
    """Convert meters to whole feet."""
    return round_half_up(meters * FEET_PER_METER)
