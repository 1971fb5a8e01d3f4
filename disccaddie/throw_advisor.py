"""
Throw recommendation engine for Disc Caddie.

From one set of calculator inputs (hand, technique, arm speed, wind,
desired line, distance) derive, per enabled throw type:
  1. Stability: how over/understable the disc should be
  2. Disc type: putter, midrange, fairway driver or driver
  3. Release angle: hyzer/anhyzer degrees and a readable description
  4. Throwing power: disc speed rating needed vs. the player's arm
plus a shared list of coaching tips.

All stages are pure functions of their inputs. Tunable weights and
thresholds come in through TuningCoefficients; nothing is read from
global state.
"""

import logging
import math

from disccaddie.models.recommendation import (
    DiscType,
    HandSide,
    LineShape,
    Recommendation,
    ReleaseRecommendation,
    ReleaseType,
    StabilityCategory,
    StabilityResult,
    ThrowingPowerEstimate,
    ThrowType,
    WindComponents,
)
from disccaddie.models.request import CalculatorRequest, TuningCoefficients
from disccaddie.utils.constants import (
    BASE_SPEED_RATINGS,
    CALM_WIND_SPEED,
    HEADWIND_SPEED_FACTOR,
    LONG_STRAIGHT_THROW_BIAS,
    LONG_THROW_DISTANCE,
    MAX_HEADWIND_SPEED_BONUS,
    NEUTRAL_ARM_SPEED,
    RELEASE_CURVE_BASE,
    RELEASE_CURVE_SCALE,
    RELEASE_FLAT_LIMIT,
    RELEASE_HEADWIND_FACTOR,
    RELEASE_MODERATE_LIMIT,
    RELEASE_SMALL_LIMIT,
    RELEASE_TAILWIND_EXTRA,
    SHORT_STRAIGHT_DISTANCE,
    SHORT_THROW_BIAS,
    SHORT_THROW_DISTANCE,
    SPEED_RATING_MAX,
    SPEED_RATING_MIN,
    STABILITY_SCORE_LIMIT,
    STRONG_CROSSWIND,
    STRONG_WIND_SPEED,
    WEAK_ARM_DRIVER_CAP,
    WEAK_ARM_FAIRWAY_CAP,
)
from disccaddie.wind import normalize_wind

logger = logging.getLogger(__name__)

TIP_HEADWIND = "Headwind: keep the nose slightly down and avoid discs that are too understable."
TIP_TAILWIND = "Tailwind: a slightly understable disc can hold straight lines."
TIP_CROSSWIND = "Crosswind: aim 1-3° into the wind."
TIP_SHORT_STRAIGHT = "Short and straight: a putter or neutral midrange is easiest to control."
TIP_FALLBACK = "Focus: pick the line first; disc and angle support the line."

# Side a throw naturally fades toward, per hand and technique
_HYZER_SIDES = {
    (HandSide.RIGHT, ThrowType.BACKHAND): LineShape.LEFT,
    (HandSide.LEFT, ThrowType.BACKHAND): LineShape.RIGHT,
    (HandSide.RIGHT, ThrowType.FOREHAND): LineShape.RIGHT,
    (HandSide.LEFT, ThrowType.FOREHAND): LineShape.LEFT,
}


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return math.floor(value + 0.5)


def get_hyzer_side(hand: HandSide, throw_type: ThrowType) -> LineShape:
    """Side (LEFT or RIGHT) the throw curves toward when released on hyzer."""
    return _HYZER_SIDES[(HandSide(hand), ThrowType(throw_type))]


def get_base_release(shape: LineShape, hyzer_side: LineShape) -> ReleaseType:
    """Release needed to fly a line: curving toward the hyzer side is a hyzer."""
    if shape == LineShape.STRAIGHT:
        return ReleaseType.STRAIGHT
    if shape == hyzer_side:
        return ReleaseType.HYZER
    return ReleaseType.ANHYZER


# =============================================================================
# Stage 1: Stability
# =============================================================================

def calculate_stability(
    hand: HandSide,
    throw_type: ThrowType,
    arm_speed: int,
    wind: WindComponents,
    shape: LineShape,
    curvature: float,
    distance: float,
    coefficients: TuningCoefficients,
) -> StabilityResult:
    """Score how overstable the disc for this throw should be.

    The score is the sum of signed biases:
    - headwind calls for more stability, tailwind for less
    - crosswind pushing toward the hyzer side adds stability,
      crosswind pushing the other way removes it
    - a faster arm turns discs over more, so it needs more stability
    - hyzer lines want stability, anhyzer lines want understability
    - short throws and long straight throws lean understable

    Args:
        hand: Throwing hand.
        throw_type: Backhand or forehand.
        arm_speed: Player arm speed (8-14).
        wind: Normalized wind.
        shape: Desired line shape.
        curvature: Desired line curvature (0-1).
        distance: Target distance in meters.
        coefficients: Bias weights.

    Returns:
        StabilityResult with the clamped score and its category.
    """
    hyzer_side = get_hyzer_side(hand, throw_type)
    base_release = get_base_release(shape, hyzer_side)

    curve_bias = 0.0
    if base_release == ReleaseType.HYZER:
        curve_bias = coefficients.curve_k * curvature
    elif base_release == ReleaseType.ANHYZER:
        curve_bias = -coefficients.curve_k * curvature

    cross_toward_hyzer = (
        (hyzer_side == LineShape.LEFT and wind.cross > 0)
        or (hyzer_side == LineShape.RIGHT and wind.cross < 0)
    )
    cross_bias = coefficients.cross_k * abs(wind.cross)
    if not cross_toward_hyzer:
        cross_bias = -cross_bias

    arm_bias = coefficients.arm_k * (arm_speed - NEUTRAL_ARM_SPEED)
    head_bias = coefficients.head_k * wind.head

    distance_bias = 0.0
    if distance <= SHORT_THROW_DISTANCE:
        distance_bias = SHORT_THROW_BIAS
    elif distance >= LONG_THROW_DISTANCE and shape == LineShape.STRAIGHT:
        distance_bias = LONG_STRAIGHT_THROW_BIAS

    total = head_bias + cross_bias + arm_bias + curve_bias + distance_bias
    score = max(-STABILITY_SCORE_LIMIT, min(STABILITY_SCORE_LIMIT, total))

    return StabilityResult(score=score, category=stability_category(score))


def stability_category(score: float) -> StabilityCategory:
    """Map a stability score to its label.

    The outer bands (< -2 and >= 2) lie outside the clamped score range,
    so a clamped score never reads as very understable or very overstable.
    """
    if score < -2:
        return StabilityCategory.VERY_UNDERSTABLE
    if score < 0:
        return StabilityCategory.UNDERSTABLE
    if score < 1:
        return StabilityCategory.NEUTRAL
    if score < 2:
        return StabilityCategory.OVERSTABLE
    return StabilityCategory.VERY_OVERSTABLE


# =============================================================================
# Stage 2: Disc Type
# =============================================================================

def calculate_disc_type(
    distance: float,
    wind: WindComponents,
    arm_speed: int,
    coefficients: TuningCoefficients,
) -> DiscType:
    """Pick a disc type from distance, then adjust for wind and arm speed.

    Headwind above windStep1 moves one type faster and above windStep2 one
    more; tailwind beyond windStep1 moves one slower. Weak arms are then
    capped: arm <= 9 never gets a driver, arm <= 8 nothing above a
    midrange.
    """
    if distance <= coefficients.t_putter:
        index = 0
    elif distance <= coefficients.t_mid:
        index = 1
    elif distance <= coefficients.t_fairway:
        index = 2
    else:
        index = 3

    fastest = DiscType.DRIVER.index
    if wind.head > coefficients.wind_step1:
        index = min(fastest, index + 1)
    if wind.head > coefficients.wind_step2:
        index = min(fastest, index + 1)
    if wind.head < -coefficients.wind_step1:
        index = max(0, index - 1)

    if arm_speed <= WEAK_ARM_DRIVER_CAP and index == fastest:
        index = DiscType.FAIRWAY_DRIVER.index
    if arm_speed <= WEAK_ARM_FAIRWAY_CAP and index > DiscType.MIDRANGE.index:
        index = DiscType.MIDRANGE.index

    return DiscType.from_index(index)


# =============================================================================
# Stage 3: Release Angle & Tips
# =============================================================================

def calculate_release(
    hand: HandSide,
    throw_type: ThrowType,
    shape: LineShape,
    curvature: float,
    wind: WindComponents,
) -> ReleaseRecommendation:
    """Recommend a release angle in degrees (positive = hyzer).

    Headwind tilts toward hyzer, tailwind toward anhyzer with an extra
    nudge. A curved line adds 5-20° toward the side it curves.
    """
    hyzer_side = get_hyzer_side(hand, throw_type)
    base_release = get_base_release(shape, hyzer_side)

    angle = wind.head * RELEASE_HEADWIND_FACTOR
    if wind.head < 0:
        angle += wind.head * RELEASE_TAILWIND_EXTRA

    curve_angle = RELEASE_CURVE_BASE + curvature * RELEASE_CURVE_SCALE
    if base_release == ReleaseType.HYZER:
        angle += curve_angle
    elif base_release == ReleaseType.ANHYZER:
        angle -= curve_angle

    return ReleaseRecommendation(angle_degrees=angle, text=describe_release(angle))


def describe_release(angle: float) -> str:
    """Readable release description, e.g. "Anhyzer (large, ~14°)"."""
    abs_angle = abs(angle)
    degrees = _round_half_up(abs_angle)

    if -RELEASE_FLAT_LIMIT <= angle <= RELEASE_FLAT_LIMIT:
        return f"flat (~{degrees}°)"

    if abs_angle > RELEASE_MODERATE_LIMIT:
        intensity = "large"
    elif abs_angle > RELEASE_SMALL_LIMIT:
        intensity = "moderate"
    else:
        intensity = "small"

    label = "Hyzer" if angle > 0 else "Anhyzer"
    return f"{label} ({intensity}, ~{degrees}°)"


def generate_tips(
    wind: WindComponents,
    wind_speed: float,
    shape: LineShape,
    distance: float,
) -> list[str]:
    """Collect every coaching tip whose condition holds, in rule order."""
    tips = []

    if wind_speed >= STRONG_WIND_SPEED and wind.head > 0:
        tips.append(TIP_HEADWIND)
    if wind_speed >= STRONG_WIND_SPEED and wind.head < 0:
        tips.append(TIP_TAILWIND)
    if abs(wind.cross) >= STRONG_CROSSWIND:
        tips.append(TIP_CROSSWIND)
    if (shape == LineShape.STRAIGHT and wind_speed <= CALM_WIND_SPEED
            and distance <= SHORT_STRAIGHT_DISTANCE):
        tips.append(TIP_SHORT_STRAIGHT)

    if not tips:
        tips.append(TIP_FALLBACK)

    return tips


# =============================================================================
# Stage 4: Throwing Power
# =============================================================================

def calculate_throwing_power(
    arm_speed: int,
    distance: float,
    disc_type: DiscType,
    wind: WindComponents,
) -> ThrowingPowerEstimate:
    """Estimate the disc speed rating the throw needs.

    The disc type's typical speed is scaled by distance/100 m; headwind
    adds up to 2 speed ratings. Ratings above the player's arm speed
    produce a warning.
    """
    base_speed = BASE_SPEED_RATINGS[DiscType(disc_type).value]
    wind_bonus = min(MAX_HEADWIND_SPEED_BONUS,
                     max(0.0, wind.head * HEADWIND_SPEED_FACTOR))
    rating = _round_half_up(base_speed * (distance / 100) + wind_bonus)
    rating = min(SPEED_RATING_MAX, max(SPEED_RATING_MIN, rating))

    warning = None
    if rating > arm_speed + 1:
        warning = (f"You may not have the power to reach {distance:g}m. "
                   f"Consider a more understable disc or a shorter distance.")
    elif rating > arm_speed:
        warning = (f"{distance:g}m is right at the edge of your arm speed. "
                   f"Throw at full power.")

    return ThrowingPowerEstimate(recommended_speed_rating=rating, warning=warning)


# =============================================================================
# Full pipeline: calculator inputs -> recommendations
# =============================================================================

def generate_recommendations(request: CalculatorRequest) -> list[Recommendation]:
    """Build one recommendation per enabled throw type, backhand first.

    Wind is normalized once and the tips are shared by all throw types.

    Args:
        request: Validated calculator inputs, including the coefficients.

    Returns:
        List of Recommendation, one per throw type in the request.
    """
    wind = normalize_wind(request.wind_direction, request.wind_speed)
    tips = generate_tips(wind, request.wind_speed, request.line_shape,
                         request.distance)

    recommendations = []
    for throw_type in request.throw_types:
        stability = calculate_stability(
            request.hand,
            throw_type,
            request.arm_speed,
            wind,
            request.line_shape,
            request.curvature,
            request.distance,
            request.coefficients,
        )
        disc_type = calculate_disc_type(
            request.distance, wind, request.arm_speed, request.coefficients,
        )
        release = calculate_release(
            request.hand, throw_type, request.line_shape,
            request.curvature, wind,
        )
        power = calculate_throwing_power(
            request.arm_speed, request.distance, disc_type, wind,
        )

        recommendation = Recommendation(
            throw_type=throw_type,
            label=f"{request.hand.value}{throw_type.value}",
            disc_type=disc_type,
            stability=stability,
            release=release,
            throwing_power=power,
            tips=list(tips),
        )
        recommendations.append(recommendation)

        logger.debug(
            f"Recommendation {recommendation.label}: {disc_type.value}, "
            f"stability={stability.score:.2f} ({stability.category.value}), "
            f"release={release.angle_degrees:.1f}°, "
            f"speed={power.recommended_speed_rating}"
        )

    return recommendations
