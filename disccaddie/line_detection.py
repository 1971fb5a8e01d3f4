"""
Freehand line interpreter for Disc Caddie.

Turns a line drawn on the hole canvas into a shape (straight, left, right)
and a curvature in [0, 1]. Only the start, end and middle sample are used:
the bend of the middle sample off the start->end chord decides everything.
Screen coordinates are assumed (y grows downward).
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from disccaddie.models.recommendation import LineAnalysis, LineShape
from disccaddie.utils.constants import (
    MIN_CHORD_LENGTH,
    MIN_LINE_POINTS,
    PRESET_MATCH_TOLERANCE,
    STRAIGHT_CURVATURE_LIMIT,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinePreset:
    """A one-click line choice on the calculator."""
    name: str
    shape: LineShape
    curvature: float


LINE_PRESETS = (
    LinePreset("very_left", LineShape.LEFT, 1.0),
    LinePreset("left", LineShape.LEFT, 0.7),
    LinePreset("slightly_left", LineShape.LEFT, 0.3),
    LinePreset("straight", LineShape.STRAIGHT, 0.0),
    LinePreset("slightly_right", LineShape.RIGHT, 0.3),
    LinePreset("right", LineShape.RIGHT, 0.7),
    LinePreset("very_right", LineShape.RIGHT, 1.0),
)


def _xy(point) -> tuple[float, float]:
    if hasattr(point, "x"):
        return float(point.x), float(point.y)
    x, y = point
    return float(x), float(y)


def analyze_line(points: Sequence) -> LineAnalysis:
    """Classify a drawn line.

    Args:
        points: Ordered (x, y) samples of the drawing, or objects with
                x and y attributes.

    Returns:
        LineAnalysis. Too few points or a chord shorter than 10 units
        read as a straight line with zero curvature.
    """
    if len(points) < MIN_LINE_POINTS:
        return LineAnalysis(LineShape.STRAIGHT, 0.0)

    start_x, start_y = _xy(points[0])
    end_x, end_y = _xy(points[-1])
    mid_x, mid_y = _xy(points[len(points) // 2])

    chord_dx = end_x - start_x
    chord_dy = end_y - start_y
    chord_len = math.hypot(chord_dx, chord_dy)

    if chord_len < MIN_CHORD_LENGTH:
        return LineAnalysis(LineShape.STRAIGHT, 0.0)

    mid_dx = mid_x - start_x
    mid_dy = mid_y - start_y

    # Foot of the perpendicular from the midpoint onto the chord
    proj_len = (mid_dx * chord_dx + mid_dy * chord_dy) / chord_len
    proj_x = start_x + proj_len * chord_dx / chord_len
    proj_y = start_y + proj_len * chord_dy / chord_len
    perp_dist = math.hypot(mid_x - proj_x, mid_y - proj_y)

    cross = chord_dx * mid_dy - chord_dy * mid_dx

    curvature = max(0.0, min(1.0, perp_dist / (chord_len + 1)))

    shape = LineShape.STRAIGHT
    if curvature > STRAIGHT_CURVATURE_LIMIT:
        shape = LineShape.LEFT if cross > 0 else LineShape.RIGHT

    logger.debug(f"Line analyzed: {len(points)} points, chord={chord_len:.1f}, "
                 f"shape={shape.value}, curvature={curvature:.3f}")
    return LineAnalysis(shape, curvature)


def get_preset(name: str) -> LinePreset:
    """Look up a line preset by name."""
    for preset in LINE_PRESETS:
        if preset.name == name:
            return preset
    raise KeyError(f"Unknown line preset: {name}")


def match_preset(shape: LineShape, curvature: float) -> Optional[LinePreset]:
    """Return the preset a shape/curvature pair corresponds to, if any."""
    for preset in LINE_PRESETS:
        if (preset.shape == shape
                and abs(curvature - preset.curvature) < PRESET_MATCH_TOLERANCE):
            return preset
    return None
