"""
Data models for throw recommendations in Disc Caddie.

WindComponents: Head/cross split of a clock-position wind.
LineAnalysis: Shape classification of a desired flight line.
StabilityResult / ReleaseRecommendation / ThrowingPowerEstimate: Outputs
    of the individual calculator stages.
Recommendation: Complete advice for one throw type.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class HandSide(str, Enum):
    """Throwing hand."""
    RIGHT = "R"
    LEFT = "L"


class ThrowType(str, Enum):
    """Primary throwing technique."""
    BACKHAND = "BH"
    FOREHAND = "FH"


class LineShape(str, Enum):
    """Shape of the intended flight line as seen from the tee."""
    STRAIGHT = "straight"
    LEFT = "left"
    RIGHT = "right"


class ReleaseType(str, Enum):
    """Release needed to produce a line for a given hand and technique."""
    HYZER = "hyzer"
    ANHYZER = "anhyzer"
    STRAIGHT = "straight"


class StabilityCategory(str, Enum):
    """Ordered stability labels, most understable first."""
    VERY_UNDERSTABLE = "very understable"
    UNDERSTABLE = "understable"
    NEUTRAL = "neutral"
    OVERSTABLE = "overstable"
    VERY_OVERSTABLE = "very overstable"


class DiscType(str, Enum):
    """Disc type buckets, ordered from slowest to fastest."""
    PUTTER = "Putter"
    MIDRANGE = "Midrange"
    FAIRWAY_DRIVER = "Fairway driver"
    DRIVER = "Driver"

    @property
    def index(self) -> int:
        return list(DiscType).index(self)

    @classmethod
    def from_index(cls, index: int) -> "DiscType":
        return list(cls)[index]


@dataclass(frozen=True)
class WindComponents:
    """Wind split along the throwing axis.

    Attributes:
        head: Headwind component (positive = into the thrower's face,
              negative = tailwind).
        cross: Crosswind component (positive = wind from the 3 o'clock
               side, blowing toward the thrower's left).
    """
    head: float
    cross: float


@dataclass(frozen=True)
class LineAnalysis:
    """Result of interpreting a drawn or preset line.

    Attributes:
        shape: Straight, left-curving, or right-curving.
        curvature: Normalized bend in [0, 1]; meaningful only for curves.
    """
    shape: LineShape
    curvature: float


@dataclass(frozen=True)
class StabilityResult:
    """Recommended disc stability.

    Attributes:
        score: Continuous stability score, clamped to [-1.5, 1.5].
        category: Label derived from the score.
    """
    score: float
    category: StabilityCategory


@dataclass(frozen=True)
class ReleaseRecommendation:
    """Recommended release angle.

    Attributes:
        angle_degrees: Signed angle (positive = hyzer, negative = anhyzer).
        text: Human-readable description, e.g. "Hyzer (moderate, ~9°)".
    """
    angle_degrees: float
    text: str


@dataclass(frozen=True)
class ThrowingPowerEstimate:
    """Disc speed the throw needs, compared to the player's arm.

    Attributes:
        recommended_speed_rating: Disc speed rating 1-14.
        warning: Present when the throw is at or beyond the player's arm.
    """
    recommended_speed_rating: int
    warning: Optional[str] = None


@dataclass
class Recommendation:
    """Complete advice for one throw type.

    Attributes:
        throw_type: Backhand or forehand.
        label: Hand + technique shorthand, e.g. "RBH".
        disc_type: Disc type bucket to pick from.
        stability: Recommended stability.
        release: Recommended release angle.
        tips: Coaching tips, in rule order.
        throwing_power: Speed rating estimate and power warning.
    """
    throw_type: ThrowType
    label: str
    disc_type: DiscType
    stability: StabilityResult
    release: ReleaseRecommendation
    throwing_power: ThrowingPowerEstimate
    tips: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Flatten into plain JSON-friendly values."""
        return {
            "throwType": self.throw_type.value,
            "label": self.label,
            "discType": self.disc_type.value,
            "stability": self.stability.category.value,
            "stabilityScore": self.stability.score,
            "release": self.release.text,
            "releaseAngle": self.release.angle_degrees,
            "tips": list(self.tips),
            "throwingPower": {
                "recommendedSpeed": self.throwing_power.recommended_speed_rating,
                "warning": self.throwing_power.warning,
            },
        }
