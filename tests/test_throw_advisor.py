"""
Tests for the throw recommendation engine.

Validates:
  - Stability scoring responds to wind, arm speed, line and distance
  - Disc type selection, wind escalation and weak-arm caps
  - Release angles and their readable descriptions
  - Tip rules and throwing power warnings
  - The full pipeline from a CalculatorRequest
"""

import pytest

from disccaddie.models.recommendation import (
    DiscType,
    HandSide,
    LineShape,
    ReleaseType,
    StabilityCategory,
    ThrowType,
    WindComponents,
)
from disccaddie.models.request import CalculatorRequest, TuningCoefficients
from disccaddie.throw_advisor import (
    TIP_CROSSWIND,
    TIP_FALLBACK,
    TIP_HEADWIND,
    TIP_SHORT_STRAIGHT,
    TIP_TAILWIND,
    calculate_disc_type,
    calculate_release,
    calculate_stability,
    calculate_throwing_power,
    describe_release,
    generate_recommendations,
    generate_tips,
    get_base_release,
    get_hyzer_side,
    stability_category,
)
from disccaddie.wind import normalize_wind

CALM = WindComponents(head=0.0, cross=0.0)
DEFAULTS = TuningCoefficients.default()


def _stability(wind=CALM, hand=HandSide.RIGHT, throw_type=ThrowType.BACKHAND,
               arm_speed=10, shape=LineShape.STRAIGHT, curvature=0.0,
               distance=80.0):
    return calculate_stability(hand, throw_type, arm_speed, wind, shape,
                               curvature, distance, DEFAULTS)


class TestHyzerSide:
    """Hand and technique decide which side is the hyzer side."""

    def test_all_combinations(self):
        """Backhand and forehand fade opposite ways, mirrored by hand."""
        assert get_hyzer_side(HandSide.RIGHT, ThrowType.BACKHAND) == LineShape.LEFT
        assert get_hyzer_side(HandSide.LEFT, ThrowType.BACKHAND) == LineShape.RIGHT
        assert get_hyzer_side(HandSide.RIGHT, ThrowType.FOREHAND) == LineShape.RIGHT
        assert get_hyzer_side(HandSide.LEFT, ThrowType.FOREHAND) == LineShape.LEFT

    def test_base_release(self):
        """Curving toward the hyzer side is a hyzer line."""
        assert get_base_release(LineShape.LEFT, LineShape.LEFT) == ReleaseType.HYZER
        assert get_base_release(LineShape.RIGHT, LineShape.LEFT) == ReleaseType.ANHYZER
        assert get_base_release(LineShape.STRAIGHT, LineShape.LEFT) == ReleaseType.STRAIGHT


class TestStability:
    """Tests for Stage 1: stability score and category."""

    def test_calm_straight_mid_distance(self):
        """No biases apply for a calm straight throw at 70 m."""
        result = _stability(distance=70.0)
        assert result.score == pytest.approx(0.0)
        assert result.category == StabilityCategory.NEUTRAL

    def test_short_throw_leans_understable(self):
        """Throws of 60 m or less get a small understable bias."""
        result = _stability(distance=60.0)
        assert result.score == pytest.approx(-0.1)
        assert result.category == StabilityCategory.UNDERSTABLE

    def test_long_straight_leans_understable(self):
        """Long straight throws get a larger understable bias."""
        result = _stability(distance=120.0)
        assert result.score == pytest.approx(-0.15)
        assert result.category == StabilityCategory.UNDERSTABLE

    def test_long_curved_has_no_distance_bias(self):
        """The long-throw bias only applies to straight lines."""
        result = _stability(distance=120.0, shape=LineShape.LEFT, curvature=0.0)
        assert result.score == pytest.approx(0.0)

    def test_headwind_adds_stability(self):
        """Headwind scales by headK."""
        assert _stability(WindComponents(5.0, 0.0)).score == pytest.approx(0.9)
        result = _stability(WindComponents(7.0, 0.0))
        assert result.score == pytest.approx(1.26)
        assert result.category == StabilityCategory.OVERSTABLE

    def test_score_is_clamped(self):
        """Score never leaves [-1.5, 1.5]."""
        high = _stability(WindComponents(20.0, 0.0))
        low = _stability(WindComponents(-20.0, 0.0))
        assert high.score == 1.5
        assert high.category == StabilityCategory.OVERSTABLE
        assert low.score == -1.5
        assert low.category == StabilityCategory.UNDERSTABLE

    def test_crosswind_toward_hyzer_side(self):
        """RHBH: wind from the right pushes toward the hyzer side."""
        assert _stability(WindComponents(0.0, 5.0)).score == pytest.approx(0.4)
        assert _stability(WindComponents(0.0, -5.0)).score == pytest.approx(-0.4)

    def test_crosswind_forehand_is_mirrored(self):
        """RHFH fades right, so wind from the left is the stabilizing side."""
        result = _stability(WindComponents(0.0, -5.0), throw_type=ThrowType.FOREHAND)
        assert result.score == pytest.approx(0.4)

    def test_hyzer_line_wants_stability(self):
        """A curve toward the hyzer side adds curveK * curvature."""
        assert _stability(shape=LineShape.LEFT, curvature=0.5).score == pytest.approx(0.15)
        assert _stability(shape=LineShape.RIGHT, curvature=0.5).score == pytest.approx(-0.15)

    def test_left_hand_mirrors_curve(self):
        """For LHBH a right curve is the hyzer line."""
        result = _stability(hand=HandSide.LEFT, shape=LineShape.RIGHT, curvature=0.5)
        assert result.score == pytest.approx(0.15)

    def test_fast_arm_needs_stability(self):
        """Arm speed above neutral adds armK per step."""
        assert _stability(arm_speed=14).score == pytest.approx(0.48)
        assert _stability(arm_speed=8).score == pytest.approx(-0.24)

    @pytest.mark.parametrize("hand", list(HandSide))
    @pytest.mark.parametrize("throw_type", list(ThrowType))
    @pytest.mark.parametrize("shape", list(LineShape))
    def test_score_bounded_for_all_inputs(self, hand, throw_type, shape):
        """Score stays in [-1.5, 1.5] across wind, arm, curve and distance."""
        for direction in range(1, 13):
            for speed in (0.0, 3.0, 8.0, 15.0, 30.0):
                wind = normalize_wind(direction, speed)
                for arm_speed in range(8, 15):
                    for curvature in (0.0, 0.5, 1.0):
                        for distance in (20.0, 60.0, 80.0, 110.0, 150.0):
                            score = _stability(wind, hand, throw_type, arm_speed,
                                               shape, curvature, distance).score
                            assert -1.5 <= score <= 1.5

    def test_stronger_headwind_never_less_stable(self):
        """Score is monotonic in headwind."""
        scores = [_stability(WindComponents(h, 0.0)).score for h in range(-10, 11)]
        assert scores == sorted(scores)

    def test_custom_coefficients(self):
        """Bias weights come from the coefficients passed in."""
        coefs = TuningCoefficients(headK=0.1)
        result = calculate_stability(HandSide.RIGHT, ThrowType.BACKHAND, 10,
                                     WindComponents(5.0, 0.0), LineShape.STRAIGHT,
                                     0.0, 80.0, coefs)
        assert result.score == pytest.approx(0.5)


class TestStabilityCategory:
    """Score to label mapping."""

    @pytest.mark.parametrize("score,expected", [
        (-2.5, StabilityCategory.VERY_UNDERSTABLE),
        (-2.0, StabilityCategory.UNDERSTABLE),
        (-0.01, StabilityCategory.UNDERSTABLE),
        (0.0, StabilityCategory.NEUTRAL),
        (0.99, StabilityCategory.NEUTRAL),
        (1.0, StabilityCategory.OVERSTABLE),
        (2.0, StabilityCategory.VERY_OVERSTABLE),
    ])
    def test_bands(self, score, expected):
        """Bands are closed below and open above."""
        assert stability_category(score) == expected


class TestDiscType:
    """Tests for Stage 2: disc type selection."""

    @pytest.mark.parametrize("distance,expected", [
        (30, DiscType.PUTTER),
        (45, DiscType.PUTTER),
        (46, DiscType.MIDRANGE),
        (75, DiscType.MIDRANGE),
        (100, DiscType.FAIRWAY_DRIVER),
        (105, DiscType.FAIRWAY_DRIVER),
        (106, DiscType.DRIVER),
    ])
    def test_distance_thresholds(self, distance, expected):
        """Distance alone picks the bucket in calm air."""
        assert calculate_disc_type(distance, CALM, 12, DEFAULTS) == expected

    def test_headwind_steps_up_once(self):
        """Headwind above windStep1 moves one type faster."""
        wind = WindComponents(5.0, 0.0)
        assert calculate_disc_type(50, wind, 12, DEFAULTS) == DiscType.FAIRWAY_DRIVER

    def test_strong_headwind_steps_up_twice(self):
        """Headwind above windStep2 moves two types faster."""
        wind = WindComponents(9.0, 0.0)
        assert calculate_disc_type(50, wind, 12, DEFAULTS) == DiscType.DRIVER

    def test_headwind_at_threshold_no_change(self):
        """Headwind equal to windStep1 does not step up."""
        wind = WindComponents(4.0, 0.0)
        assert calculate_disc_type(80, wind, 12, DEFAULTS) == DiscType.FAIRWAY_DRIVER

    def test_tailwind_steps_down(self):
        """Tailwind beyond windStep1 moves one type slower."""
        assert calculate_disc_type(80, WindComponents(-5.0, 0.0), 12, DEFAULTS) == DiscType.MIDRANGE
        assert calculate_disc_type(80, WindComponents(-4.0, 0.0), 12, DEFAULTS) == DiscType.FAIRWAY_DRIVER

    def test_tailwind_floor(self):
        """Putter is the slowest bucket."""
        assert calculate_disc_type(30, WindComponents(-10.0, 0.0), 12, DEFAULTS) == DiscType.PUTTER

    def test_weak_arm_no_driver(self):
        """Arm speed 9 or less never gets a driver."""
        wind = WindComponents(9.0, 0.0)
        assert calculate_disc_type(50, wind, 9, DEFAULTS) == DiscType.FAIRWAY_DRIVER

    def test_very_weak_arm_caps_at_midrange(self):
        """Arm speed 8 caps at midrange, even for long windy throws."""
        wind = WindComponents(9.0, 0.0)
        assert calculate_disc_type(120, wind, 8, DEFAULTS) == DiscType.MIDRANGE

    @pytest.mark.parametrize("arm_speed", range(8, 15))
    def test_longer_never_slower(self, arm_speed):
        """For fixed wind and arm, the bucket never drops as distance grows."""
        for direction in range(1, 13):
            for speed in (0.0, 2.0, 5.0, 9.0, 15.0):
                wind = normalize_wind(direction, speed)
                indices = [calculate_disc_type(d, wind, arm_speed, DEFAULTS).index
                           for d in range(1, 201)]
                assert indices == sorted(indices)

    def test_custom_thresholds(self):
        """Distance thresholds come from the coefficients."""
        coefs = TuningCoefficients(tPutter=60)
        assert calculate_disc_type(55, CALM, 12, coefs) == DiscType.PUTTER


class TestRelease:
    """Tests for Stage 3: release angle."""

    def test_calm_straight_is_flat(self):
        """No wind and no curve is a flat release."""
        rec = calculate_release(HandSide.RIGHT, ThrowType.BACKHAND,
                                LineShape.STRAIGHT, 0.0, CALM)
        assert rec.angle_degrees == 0.0
        assert rec.text == "flat (~0°)"

    def test_full_hyzer_curve(self):
        """A fully curved hyzer line adds 20°."""
        rec = calculate_release(HandSide.RIGHT, ThrowType.BACKHAND,
                                LineShape.LEFT, 1.0, CALM)
        assert rec.angle_degrees == pytest.approx(20.0)
        assert rec.text == "Hyzer (large, ~20°)"

    def test_minimal_anhyzer_curve(self):
        """Any anhyzer curve starts at 5°."""
        rec = calculate_release(HandSide.RIGHT, ThrowType.BACKHAND,
                                LineShape.RIGHT, 0.0, CALM)
        assert rec.angle_degrees == pytest.approx(-5.0)
        assert rec.text == "Anhyzer (small, ~5°)"

    def test_headwind_tilts_hyzer(self):
        """Headwind adds 1.2° per unit."""
        rec = calculate_release(HandSide.RIGHT, ThrowType.BACKHAND,
                                LineShape.STRAIGHT, 0.0, WindComponents(5.0, 0.0))
        assert rec.angle_degrees == pytest.approx(6.0)
        assert rec.text == "Hyzer (small, ~6°)"

    def test_tailwind_extra_anhyzer(self):
        """Tailwind adds 1.8° of anhyzer per unit."""
        rec = calculate_release(HandSide.RIGHT, ThrowType.BACKHAND,
                                LineShape.STRAIGHT, 0.0, WindComponents(-5.0, 0.0))
        assert rec.angle_degrees == pytest.approx(-9.0)
        assert rec.text == "Anhyzer (moderate, ~9°)"

    def test_forehand_left_curve_is_anhyzer(self):
        """For RHFH a left curve is the anhyzer line."""
        rec = calculate_release(HandSide.RIGHT, ThrowType.FOREHAND,
                                LineShape.LEFT, 0.5, CALM)
        assert rec.angle_degrees == pytest.approx(-12.5)


class TestDescribeRelease:
    """Release descriptions."""

    @pytest.mark.parametrize("angle,expected", [
        (0.0, "flat (~0°)"),
        (2.5, "flat (~3°)"),
        (3.0, "flat (~3°)"),
        (-3.0, "flat (~3°)"),
        (-7.0, "Anhyzer (small, ~7°)"),
        (7.5, "Hyzer (moderate, ~8°)"),
        (12.0, "Hyzer (moderate, ~12°)"),
        (12.5, "Hyzer (large, ~13°)"),
        (-14.2, "Anhyzer (large, ~14°)"),
    ])
    def test_bands(self, angle, expected):
        """Flat within ±3°, then small/moderate/large by magnitude."""
        assert describe_release(angle) == expected


class TestTips:
    """Tip rules."""

    def test_strong_headwind(self):
        """Strong headwind gives the headwind tip."""
        tips = generate_tips(normalize_wind(12, 10.0), 10.0, LineShape.STRAIGHT, 100)
        assert tips == [TIP_HEADWIND]

    def test_strong_tailwind(self):
        """Strong tailwind gives the tailwind tip."""
        tips = generate_tips(normalize_wind(6, 10.0), 10.0, LineShape.STRAIGHT, 100)
        assert tips == [TIP_TAILWIND]

    def test_crosswind(self):
        """Crosswind of 4 or more gives the crosswind tip."""
        tips = generate_tips(normalize_wind(3, 5.0), 5.0, LineShape.STRAIGHT, 100)
        assert tips == [TIP_CROSSWIND]

    def test_rules_accumulate(self):
        """Several matching rules all contribute, in rule order."""
        tips = generate_tips(normalize_wind(2, 10.0), 10.0, LineShape.LEFT, 100)
        assert tips == [TIP_HEADWIND, TIP_CROSSWIND]

    def test_short_calm_straight(self):
        """Short straight throws in calm air get the control tip."""
        tips = generate_tips(CALM, 0.0, LineShape.STRAIGHT, 50)
        assert tips == [TIP_SHORT_STRAIGHT]

    def test_fallback(self):
        """When nothing applies the fallback tip is used."""
        tips = generate_tips(CALM, 0.0, LineShape.STRAIGHT, 100)
        assert tips == [TIP_FALLBACK]

    def test_never_empty(self):
        """There is always at least one tip."""
        for direction in range(1, 13):
            for speed in (0.0, 3.0, 8.0, 15.0):
                wind = normalize_wind(direction, speed)
                assert generate_tips(wind, speed, LineShape.LEFT, 90)


class TestThrowingPower:
    """Tests for Stage 4: throwing power."""

    def test_half_rounds_up(self):
        """4.5 rounds to 5."""
        est = calculate_throwing_power(10, 150, DiscType.PUTTER, CALM)
        assert est.recommended_speed_rating == 5
        assert est.warning is None

    def test_hard_warning(self):
        """Needing more than arm speed + 1 is a hard warning."""
        est = calculate_throwing_power(10, 120, DiscType.DRIVER, CALM)
        assert est.recommended_speed_rating == 14
        assert est.warning.startswith("You may not have the power to reach 120m")

    def test_soft_warning(self):
        """Needing exactly arm speed + 1 is a soft warning."""
        est = calculate_throwing_power(10, 90, DiscType.DRIVER, CALM)
        assert est.recommended_speed_rating == 11
        assert est.warning == "90m is right at the edge of your arm speed. Throw at full power."

    def test_headwind_bonus(self):
        """Headwind adds half a speed per unit, at most 2."""
        assert calculate_throwing_power(14, 100, DiscType.MIDRANGE,
                                        WindComponents(10.0, 0.0)).recommended_speed_rating == 7
        assert calculate_throwing_power(14, 100, DiscType.MIDRANGE,
                                        WindComponents(2.0, 0.0)).recommended_speed_rating == 6

    def test_tailwind_no_bonus(self):
        """Tailwind does not reduce the rating."""
        est = calculate_throwing_power(14, 100, DiscType.MIDRANGE, WindComponents(-10.0, 0.0))
        assert est.recommended_speed_rating == 5

    def test_clamped(self):
        """Ratings stay within 1-14."""
        assert calculate_throwing_power(10, 10, DiscType.PUTTER, CALM).recommended_speed_rating == 1
        assert calculate_throwing_power(14, 150, DiscType.DRIVER,
                                        WindComponents(10.0, 0.0)).recommended_speed_rating == 14


class TestGenerateRecommendations:
    """Tests for the full pipeline."""

    def _request(self, **overrides):
        params = dict(hand="R", throw_types=["BH"], arm_speed=10,
                      wind_direction=12, wind_speed=0, distance=60)
        params.update(overrides)
        return CalculatorRequest(**params)

    def test_single_backhand(self):
        """A calm 60 m straight backhand."""
        recs = generate_recommendations(self._request())
        assert len(recs) == 1
        rec = recs[0]
        assert rec.label == "RBH"
        assert rec.disc_type == DiscType.MIDRANGE
        assert rec.stability.category == StabilityCategory.UNDERSTABLE
        assert rec.release.text == "flat (~0°)"
        assert rec.throwing_power.recommended_speed_rating == 3
        assert rec.tips == [TIP_SHORT_STRAIGHT]

    def test_backhand_first(self):
        """Both types are returned, backhand before forehand."""
        recs = generate_recommendations(self._request(throw_types=["FH", "BH"]))
        assert [r.label for r in recs] == ["RBH", "RFH"]

    def test_tips_shared(self):
        """Every throw type gets the same tips."""
        recs = generate_recommendations(self._request(throw_types=["BH", "FH"],
                                                      wind_direction=3, wind_speed=5))
        assert recs[0].tips == recs[1].tips == [TIP_CROSSWIND]

    def test_crosswind_differs_by_technique(self):
        """Wind from the right helps RHBH stability and hurts RHFH."""
        recs = generate_recommendations(self._request(throw_types=["BH", "FH"],
                                                      wind_direction=3, wind_speed=5,
                                                      distance=80))
        assert recs[0].stability.score == pytest.approx(0.4)
        assert recs[1].stability.score == pytest.approx(-0.4)

    def test_left_handed_label(self):
        """Labels carry the hand."""
        recs = generate_recommendations(self._request(hand="L", throw_types=["FH"]))
        assert recs[0].label == "LFH"

    def test_to_dict(self):
        """Serialized recommendation uses plain values."""
        data = generate_recommendations(self._request())[0].to_dict()
        assert data["label"] == "RBH"
        assert data["discType"] == "Midrange"
        assert data["stability"] == "understable"
        assert data["throwingPower"] == {"recommendedSpeed": 3, "warning": None}
