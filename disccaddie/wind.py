"""
Wind model for Disc Caddie.

Wind is entered as a clock position relative to the throwing line
(12 = blowing straight into the thrower's face) plus a speed in m/s.
"""

import math

from disccaddie.models.recommendation import WindComponents
from disccaddie.utils.constants import DEGREES_PER_CLOCK_HOUR, WIND_DIRECTION_MAX


def normalize_wind(direction: int, speed: float) -> WindComponents:
    """Split a clock-position wind into head and cross components.

    Sign convention:
        head > 0 is a headwind, head < 0 a tailwind.
        cross > 0 is wind from 1-5 o'clock, cross < 0 from 7-11 o'clock.

    Args:
        direction: Clock position the wind comes from (1-12).
        speed: Wind speed (m/s, >= 0).

    Returns:
        WindComponents with head and cross in the units of speed.
    """
    angle = math.radians((direction - WIND_DIRECTION_MAX) * DEGREES_PER_CLOCK_HOUR)
    return WindComponents(
        head=math.cos(angle) * speed,
        cross=math.sin(angle) * speed,
    )
