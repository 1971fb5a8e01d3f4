"""
Validated inputs for the Disc Caddie calculators.

The calculation functions themselves trust their inputs; these models are
the hardened boundary for callers that do not constrain input ranges
(CLI, shared links, other services). Out-of-range values raise
pydantic.ValidationError naming the field and its bound.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from disccaddie.models.disc import Disc
from disccaddie.models.flight import ReleaseAngle
from disccaddie.models.recommendation import HandSide, LineShape, ThrowType
from disccaddie.utils.constants import (
    ARM_SPEED_MAX,
    ARM_SPEED_MIN,
    COEF_LIMITS,
    DEFAULT_COEFFICIENTS,
    WIND_DIRECTION_MAX,
    WIND_DIRECTION_MIN,
)


def _coefficient(key: str):
    limits = COEF_LIMITS[key]
    return Field(
        DEFAULT_COEFFICIENTS[key],
        alias=key,
        ge=limits["min"],
        le=limits["max"],
    )


class TuningCoefficients(BaseModel):
    """The nine user-tunable calculator coefficients.

    Accepts both the stored preference names (headK, tPutter, ...) and the
    Python attribute names. Threshold ordering (tPutter < tMid < tFairway)
    is left to the caller.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    head_k: float = _coefficient("headK")
    cross_k: float = _coefficient("crossK")
    arm_k: float = _coefficient("armK")
    curve_k: float = _coefficient("curveK")
    t_putter: float = _coefficient("tPutter")
    t_mid: float = _coefficient("tMid")
    t_fairway: float = _coefficient("tFairway")
    wind_step1: float = _coefficient("windStep1")
    wind_step2: float = _coefficient("windStep2")

    @classmethod
    def default(cls) -> "TuningCoefficients":
        return cls.model_validate(DEFAULT_COEFFICIENTS)

    def to_preferences(self) -> dict:
        """Serialize using the stored preference key names."""
        return self.model_dump(by_alias=True)


class CalculatorRequest(BaseModel):
    """Everything the throw calculator needs for one recommendation run."""

    model_config = ConfigDict(frozen=True)

    hand: HandSide
    throw_types: tuple[ThrowType, ...] = Field(..., min_length=1)
    arm_speed: int = Field(..., ge=ARM_SPEED_MIN, le=ARM_SPEED_MAX)
    wind_direction: int = Field(..., ge=WIND_DIRECTION_MIN, le=WIND_DIRECTION_MAX)
    wind_speed: float = Field(..., ge=0)
    distance: float = Field(..., gt=0)
    line_shape: LineShape = LineShape.STRAIGHT
    curvature: float = Field(0.0, ge=0, le=1)
    coefficients: TuningCoefficients = Field(default_factory=TuningCoefficients.default)

    @field_validator("throw_types")
    @classmethod
    def _backhand_first(cls, value: tuple[ThrowType, ...]) -> tuple[ThrowType, ...]:
        return tuple(t for t in ThrowType if t in value)


class FlightPathRequest(BaseModel):
    """Inputs for rendering one disc's predicted flight."""

    model_config = ConfigDict(frozen=True)

    speed: float = Field(..., ge=1, le=15)
    glide: float = Field(..., ge=0, le=7)
    turn: float = Field(..., ge=-5, le=2)
    fade: float = Field(..., ge=0, le=6)
    release_angle: ReleaseAngle = ReleaseAngle.FLAT
    throw_style_id: str = "backhand_standard"
    is_left_handed: bool = False

    @classmethod
    def for_disc(cls, disc: Disc, release_angle: ReleaseAngle = ReleaseAngle.FLAT,
                 throw_style_id: str = "backhand_standard",
                 is_left_handed: bool = False) -> "FlightPathRequest":
        return cls(
            speed=disc.effective_speed,
            glide=disc.effective_glide,
            turn=disc.effective_turn,
            fade=disc.effective_fade,
            release_angle=release_angle,
            throw_style_id=throw_style_id,
            is_left_handed=is_left_handed,
        )
