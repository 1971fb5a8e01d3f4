"""
Calculator state in a query string.

Lets a calculator setup (hand, techniques, arm, wind, distance, line) be
bookmarked or sent as a link. Parsing is lenient: anything missing,
malformed or out of range is dropped rather than rejected, so an old or
hand-edited link still opens the calculator.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, urlencode

from disccaddie.models.recommendation import HandSide, LineShape, ThrowType
from disccaddie.models.request import CalculatorRequest, TuningCoefficients
from disccaddie.utils.constants import (
    ARM_SPEED_MAX,
    ARM_SPEED_MIN,
    LINK_DISTANCE_MAX,
    LINK_DISTANCE_MIN,
    LINK_STATE_VERSION,
    LINK_WIND_SPEED_MAX,
    LINK_WIND_SPEED_MIN,
    WIND_DIRECTION_MAX,
    WIND_DIRECTION_MIN,
)

logger = logging.getLogger(__name__)


@dataclass
class CalculatorState:
    """Calculator inputs as kept by the front end.

    Attributes:
        side: Throwing hand, or None before the profile is filled in.
        bh: Backhand enabled.
        fh: Forehand enabled.
        arm: Arm speed (8-14).
        wd: Wind clock direction, or None if not set.
        ws: Wind speed, or None if not set.
        dist: Distance in meters, or None if not set.
        shape: Desired line shape.
        curv: Desired line curvature.
    """
    side: Optional[HandSide] = None
    bh: bool = True
    fh: bool = False
    arm: int = 10
    wd: Optional[int] = None
    ws: Optional[int] = None
    dist: Optional[int] = None
    shape: LineShape = LineShape.STRAIGHT
    curv: float = 0.0

    def to_request(self, coefficients: Optional[TuningCoefficients] = None) -> CalculatorRequest:
        """Build a calculator request; raises ValidationError if incomplete."""
        throw_types = [t for t, enabled in ((ThrowType.BACKHAND, self.bh),
                                            (ThrowType.FOREHAND, self.fh))
                       if enabled]
        fields = {
            "hand": self.side,
            "throw_types": throw_types,
            "arm_speed": self.arm,
            "wind_direction": self.wd,
            "wind_speed": self.ws,
            "distance": self.dist,
            "line_shape": self.shape,
            "curvature": self.curv,
        }
        if coefficients is not None:
            fields["coefficients"] = coefficients
        return CalculatorRequest(**fields)


def build_query(state: CalculatorState) -> str:
    """Encode a calculator state as a query string (without the '?')."""
    params = [("v", LINK_STATE_VERSION)]
    if state.side is not None:
        params.append(("side", HandSide(state.side).value))
    params.append(("bh", "1" if state.bh else "0"))
    params.append(("fh", "1" if state.fh else "0"))
    params.append(("arm", str(state.arm)))
    if state.wd is not None:
        params.append(("wd", str(state.wd)))
    if state.ws is not None:
        params.append(("ws", str(state.ws)))
    if state.dist is not None:
        params.append(("dist", str(state.dist)))
    params.append(("shape", LineShape(state.shape).value))
    params.append(("curv", f"{state.curv:.2f}"))
    return urlencode(params)


def _int_in_range(raw: str, low: int, high: int) -> Optional[int]:
    # ASCII digits only
    if not (raw.isascii() and raw.isdigit()):
        return None
    value = int(raw)
    if low <= value <= high:
        return value
    return None


def _flag(raw: str) -> Optional[bool]:
    if raw in ("0", "1"):
        return raw == "1"
    return None


def parse_query(query: str) -> dict:
    """Decode the recognized, valid parts of a query string.

    Returns:
        Dict of CalculatorState field names to values; only fields that
        were present and valid are included.
    """
    params = {key: values[0] for key, values
              in parse_qs(query.lstrip("?")).items()}
    state = {}

    if params.get("side") in ("R", "L"):
        state["side"] = HandSide(params["side"])

    for key in ("bh", "fh"):
        if key in params:
            flag = _flag(params[key])
            if flag is not None:
                state[key] = flag

    ranges = {
        "arm": (ARM_SPEED_MIN, ARM_SPEED_MAX),
        "wd": (WIND_DIRECTION_MIN, WIND_DIRECTION_MAX),
        "ws": (LINK_WIND_SPEED_MIN, LINK_WIND_SPEED_MAX),
        "dist": (LINK_DISTANCE_MIN, LINK_DISTANCE_MAX),
    }
    for key, (low, high) in ranges.items():
        if key in params:
            value = _int_in_range(params[key], low, high)
            if value is not None:
                state[key] = value

    if params.get("shape") in ("straight", "left", "right"):
        state["shape"] = LineShape(params["shape"])

    if "curv" in params:
        try:
            curv = float(params["curv"])
        except ValueError:
            curv = None
        if curv is not None and 0 <= curv <= 1:
            state["curv"] = curv

    dropped = set(params) - set(state) - {"v"}
    if dropped:
        logger.debug(f"Ignored query parameters: {sorted(dropped)}")
    return state


def state_from_query(query: str) -> CalculatorState:
    """CalculatorState with the query's valid values over the defaults."""
    return CalculatorState(**parse_query(query))


def should_skip_profile(parsed: dict) -> bool:
    """True when a link already says which hand and techniques to use."""
    return all(key in parsed for key in ("side", "bh", "fh"))
