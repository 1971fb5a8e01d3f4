"""
Data models for predicted disc flight in Disc Caddie.

FlightPathPoint: One sample of the flight (meters).
FlightPathCurve: The full 101-sample flight plus normalization scalars.
ThrowStyleModifiers: How a throw style bends the generic flight model.
"""

from dataclasses import dataclass
from enum import Enum


class ReleaseAngle(str, Enum):
    """Release angle picked for a flight-path render."""
    ANHYZER = "anhyzer"
    FLAT = "flat"
    HYZER = "hyzer"


@dataclass(frozen=True)
class FlightPathPoint:
    """A single point of the predicted flight.

    Attributes:
        distance: Meters along the flight axis.
        lateral_offset: Meters off the axis (positive = right for a
                        right-handed thrower's view).
        height: Meters above the ground.
    """
    distance: float
    lateral_offset: float
    height: float


@dataclass(frozen=True)
class FlightPathCurve:
    """Predicted flight path.

    Attributes:
        points: Exactly 101 samples, from release (t=0) to landing (t=1).
        max_distance: Landing distance, used to scale the rendering.
        max_height: Peak height of the model, used to scale the rendering.
    """
    points: tuple[FlightPathPoint, ...]
    max_distance: float
    max_height: float

    @property
    def landing_offset(self) -> float:
        """Lateral offset at the landing point."""
        return self.points[-1].lateral_offset

    def to_dict(self) -> dict:
        return {
            "points": [
                {"x": p.distance, "y": p.lateral_offset, "height": p.height}
                for p in self.points
            ],
            "maxDistance": self.max_distance,
            "maxHeight": self.max_height,
        }


@dataclass(frozen=True)
class ThrowStyleModifiers:
    """Per-style adjustments to the flight model.

    Attributes:
        turn_multiplier: Scales the high-speed turn phase.
        fade_multiplier: Scales the low-speed fade phase.
        height_peak_position: Fraction of the flight at which height peaks.
        is_roller: Disc lands on edge and rolls.
        is_vertical: Disc flies on edge (overhead and vertical throws).
        vertical_drift: Sideways pan of vertical throws (sign = direction).
        distance_factor: Multiplier on base distance.
        height_factor: Multiplier on base height.
    """
    turn_multiplier: float = 1.0
    fade_multiplier: float = 1.0
    height_peak_position: float = 0.4
    is_roller: bool = False
    is_vertical: bool = False
    vertical_drift: float = 0.0
    distance_factor: float = 1.0
    height_factor: float = 1.0
