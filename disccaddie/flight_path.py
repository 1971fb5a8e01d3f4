"""
Flight path generator for Disc Caddie.

Produces a 2D-plus-height sketch of a disc's flight for the flight-path
visualization. This is a shape model driven by flight numbers, not a
physics simulation:
  - distance and peak height scale with speed and glide
  - high-speed turn builds over the first 60% of the flight
  - low-speed fade builds quadratically over the last 50%
  - the release angle starts the disc off-axis and decays linearly
  - rollers and vertical throws use their own height/offset shapes

Coordinate system (meters):
    distance = along the flight axis (0 at release)
    lateral_offset = sideways (positive = right for a right-handed view)
    height = above the ground
"""

import logging
import math
from typing import Union

import numpy as np

from disccaddie.models.disc import Disc
from disccaddie.models.flight import (
    FlightPathCurve,
    FlightPathPoint,
    ReleaseAngle,
    ThrowStyleModifiers,
)
from disccaddie.throw_styles import get_throw_style_modifiers
from disccaddie.utils.constants import (
    DISTANCE_PER_GLIDE,
    DISTANCE_PER_SPEED,
    FADE_FACTOR,
    FADE_PHASE_START,
    FLIGHT_PATH_SAMPLES,
    HEIGHT_DECAY_EXPONENT,
    HEIGHT_PER_GLIDE,
    HEIGHT_PER_SPEED,
    RELEASE_ANGLE_OFFSETS,
    RELEASE_INFLUENCE_FACTOR,
    ROLLER_FADE_FACTOR,
    ROLLER_HEIGHT,
    ROLLER_MAX_HEIGHT,
    ROLLER_TURN_FACTOR,
    ROLLER_TURN_OFFSET,
    TURN_FACTOR,
    TURN_PHASE_END,
    VERTICAL_DRIFT_FACTOR,
    VERTICAL_PEAK_POSITION,
)

logger = logging.getLogger(__name__)


def calculate_flight_path(
    speed: float,
    glide: float,
    turn: float,
    fade: float,
    release_angle: Union[ReleaseAngle, str] = ReleaseAngle.FLAT,
    throw_style_id: str = "backhand_standard",
    is_left_handed: bool = False,
) -> FlightPathCurve:
    """Generate the predicted flight of a disc.

    Args:
        speed: Disc speed rating.
        glide: Disc glide rating.
        turn: Disc turn rating (negative = turns over).
        fade: Disc fade rating.
        release_angle: Anhyzer, flat, or hyzer.
        throw_style_id: Throw style id from the catalog; unknown ids use
                        default modifiers.
        is_left_handed: Mirror turn and fade to the other side.

    Returns:
        FlightPathCurve with 101 points at t = 0, 0.01, ..., 1.
    """
    release_angle = ReleaseAngle(release_angle)
    modifiers = get_throw_style_modifiers(throw_style_id)

    max_distance = _max_distance(speed, glide, modifiers)
    max_height = _max_height(speed, glide, modifiers)
    hand_multiplier = -1 if is_left_handed else 1
    release_offset = RELEASE_ANGLE_OFFSETS[release_angle.value]

    t = np.arange(FLIGHT_PATH_SAMPLES + 1) / FLIGHT_PATH_SAMPLES
    distances = t * max_distance
    heights = _height_profile(t, max_height, modifiers)
    offsets = _lateral_profile(t, turn, fade, max_distance, release_offset,
                               modifiers, hand_multiplier)

    points = tuple(
        FlightPathPoint(float(d), float(y), float(h))
        for d, y, h in zip(distances, offsets, heights)
    )

    logger.debug(
        f"Flight path: style={throw_style_id} release={release_angle.value} "
        f"distance={max_distance:.1f}m height={max_height:.1f}m "
        f"landing_offset={points[-1].lateral_offset:.1f}m"
    )

    return FlightPathCurve(points=points, max_distance=max_distance,
                           max_height=max_height)


def flight_path_for_disc(
    disc: Disc,
    release_angle: Union[ReleaseAngle, str] = ReleaseAngle.FLAT,
    throw_style_id: str = "backhand_standard",
    is_left_handed: bool = False,
) -> FlightPathCurve:
    """Flight path for a disc, using its personal numbers where set."""
    return calculate_flight_path(
        disc.effective_speed, disc.effective_glide,
        disc.effective_turn, disc.effective_fade,
        release_angle=release_angle,
        throw_style_id=throw_style_id,
        is_left_handed=is_left_handed,
    )


def _max_distance(speed: float, glide: float,
                  modifiers: ThrowStyleModifiers) -> float:
    distance = speed * DISTANCE_PER_SPEED
    distance *= modifiers.distance_factor
    distance *= (1 + glide * DISTANCE_PER_GLIDE)
    return distance


def _max_height(speed: float, glide: float,
                modifiers: ThrowStyleModifiers) -> float:
    if modifiers.is_roller:
        return ROLLER_MAX_HEIGHT
    height = speed * HEIGHT_PER_SPEED
    height *= modifiers.height_factor
    height *= (1 + glide * HEIGHT_PER_GLIDE)
    return height


def _height_profile(t: np.ndarray, max_height: float,
                    modifiers: ThrowStyleModifiers) -> np.ndarray:
    """Height at each t: linear climb to the peak, then descent."""
    if modifiers.is_roller:
        return np.full_like(t, ROLLER_HEIGHT)

    if modifiers.is_vertical:
        peak = VERTICAL_PEAK_POSITION
        return np.where(
            t < peak,
            (t / peak) * max_height,
            max_height * (1 - ((t - peak) / (1 - peak))),
        )

    peak = modifiers.height_peak_position
    # Past the peak the base is in [0, 1]; before it the branch is unused
    descent_base = np.clip(1 - ((t - peak) / (1 - peak)), 0.0, None)
    return np.where(
        t < peak,
        (t / peak) * max_height,
        max_height * descent_base ** HEIGHT_DECAY_EXPONENT,
    )


def _lateral_profile(
    t: np.ndarray,
    turn: float,
    fade: float,
    max_distance: float,
    release_offset: int,
    modifiers: ThrowStyleModifiers,
    hand_multiplier: int,
) -> np.ndarray:
    """Sideways offset at each t.

    The release-angle term is not mirrored for left-handed throws; only
    turn and fade are.
    """
    if modifiers.is_roller:
        roller_turn = (turn - ROLLER_TURN_OFFSET) * max_distance * ROLLER_TURN_FACTOR
        roller_fade = fade * max_distance * ROLLER_FADE_FACTOR
        return (roller_turn * t + roller_fade * t ** 2) * hand_multiplier

    if modifiers.is_vertical:
        drift = modifiers.vertical_drift * max_distance * VERTICAL_DRIFT_FACTOR
        return drift * np.sin(t * math.pi) * hand_multiplier

    turn_phase = np.where(t < TURN_PHASE_END, t / TURN_PHASE_END, 1.0)
    fade_phase = np.where(
        t > FADE_PHASE_START,
        ((t - FADE_PHASE_START) / (1 - FADE_PHASE_START)) ** 2,
        0.0,
    )

    turn_amount = (turn * turn_phase * max_distance * TURN_FACTOR
                   * modifiers.turn_multiplier)
    fade_amount = (fade * fade_phase * max_distance * FADE_FACTOR
                   * modifiers.fade_multiplier)
    release_influence = (release_offset * max_distance
                         * RELEASE_INFLUENCE_FACTOR * (1 - t))

    return (release_influence + turn_amount * hand_multiplier
            - fade_amount * hand_multiplier)
