"""
Throw-style catalog for Disc Caddie.

Lists every throw style a player can pick for a flight-path render,
grouped into categories, and the flight-model modifiers for each style.
The modifier table is built once at import. Ids that are not in it get
DEFAULT_MODIFIERS, or the roller modifiers when the id names a roller.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from disccaddie.models.flight import ThrowStyleModifiers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThrowStyle:
    id: str
    name: str
    description: str


@dataclass(frozen=True)
class ThrowStyleCategory:
    id: str
    name: str
    styles: tuple[ThrowStyle, ...]


THROW_STYLE_CATEGORIES = (
    ThrowStyleCategory("backhand", "Backhand", (
        ThrowStyle(
            "backhand_standard", "Backhand (standard)",
            "The most common throw: power, control and glide from hip "
            "rotation and a pulled-through arm. Works for straight, hyzer, "
            "anhyzer and hyzerflip lines.",
        ),
        ThrowStyle(
            "backhand_hyzerflip", "Backhand hyzerflip",
            "Understable disc released on hyzer that flips up to flat. "
            "Long, controlled straight or gentle turning lines; very "
            "reliable through tunnels.",
        ),
        ThrowStyle(
            "backhand_roller", "Backhand roller",
            "Hard anhyzer with an understable disc so it lands on edge and "
            "rolls. For fairways closed above but open on the ground.",
        ),
        ThrowStyle(
            "backhand_cut_roller", "Backhand cut-roller",
            "Rolls in an arc toward the throwing side. More control and "
            "less distance than a full roller; gets around corners on the "
            "ground.",
        ),
        ThrowStyle(
            "backhand_standup_roller", "Backhand stand-up roller",
            "Starts at a steep angle and stands up while rolling. Softer "
            "and more predictable than a turnover roller.",
        ),
    )),
    ThrowStyleCategory("forehand", "Forehand", (
        ThrowStyle(
            "forehand_standard", "Forehand (standard)",
            "Side-arm throw with a wrist snap. Sharp lines, good precision "
            "and a natural fade; steady in crosswind.",
        ),
        ThrowStyle(
            "forehand_flex", "Forehand flex",
            "Overstable disc released on anhyzer that fights back. Control "
            "in wind and an S-curve from the forehand side.",
        ),
        ThrowStyle(
            "forehand_roller", "Forehand roller",
            "Hard anhyzer forehand that lands on edge and rolls. Turns "
            "over sooner than a backhand roller.",
        ),
        ThrowStyle(
            "forehand_cut_roller", "Forehand cut-roller",
            "Roller that cuts toward the throwing side. Quick, aggressive "
            "roll around ground obstacles.",
        ),
        ThrowStyle(
            "forehand_standup_roller", "Forehand stand-up roller",
            "Starts steep and stands up while rolling. A controlled ground "
            "line for narrow wooded gaps.",
        ),
    )),
    ThrowStyleCategory("overhead", "Overhead", (
        ThrowStyle(
            "tomahawk", "Tomahawk",
            "Overhead forehand with the disc vertical. Corkscrews, pans to "
            "one side and drops; for getting over trees.",
        ),
        ThrowStyle(
            "thumber", "Thumber",
            "Mirror of the tomahawk, gripped with the thumb under the rim. "
            "Pans the opposite way with a steadier drop.",
        ),
    )),
    ThrowStyleCategory("vertical", "Vertical / Specialty", (
        ThrowStyle(
            "grenade", "Grenade",
            "Upside-down disc thrown nearly straight up. Dives hard with "
            "almost no glide; for short holes with ceiling but no width.",
        ),
        ThrowStyle(
            "vertical_backhand", "Vertical backhand",
            "A backhand thrown almost straight up. Rare, but useful for "
            "quick up-and-down lines through vertical gaps.",
        ),
    )),
    ThrowStyleCategory("putt_approach", "Putt & Approach", (
        ThrowStyle(
            "push_putt", "Push putt",
            "Arm moves like a piston. Straight, low-glide flight that holds "
            "in wind; minimizes blow-bys.",
        ),
        ThrowStyle(
            "spin_putt", "Spin putt",
            "More speed and spin from wrist and forearm. Holds a line "
            "longer and through wind, with more range.",
        ),
        ThrowStyle(
            "hybrid_putt", "Hybrid putt",
            "A blend of push and spin. A little extra power without losing "
            "stability.",
        ),
        ThrowStyle(
            "turbo_putt", "Turbo putt",
            "Disc held overhead and pushed forward like a dart. Goes high "
            "and down; for putting over bushes.",
        ),
        ThrowStyle(
            "forehand_approach", "Forehand approach",
            "Short, controlled forehand. Very stable and precise in wind "
            "for 50-90 m shots.",
        ),
        ThrowStyle(
            "backhand_approach", "Backhand approach",
            "Short backhand at moderate power. Soft landings on hyzer and "
            "flat lines.",
        ),
        ThrowStyle(
            "float_shot", "Float shot (soft stall)",
            "Soft throw with a high release and low power. Floats up and "
            "stalls near the basket; avoids long skips.",
        ),
    )),
    ThrowStyleCategory("utility", "Utility / Trick", (
        ThrowStyle(
            "scoober", "Scoober",
            "Small overhead approach with the disc angled across. Flat, "
            "low and stable into small windows.",
        ),
        ThrowStyle(
            "pancake", "Pancake",
            "Thumber-like throw that lands flat and stops dead. Control "
            "over distance in tight spots.",
        ),
    )),
)

DEFAULT_MODIFIERS = ThrowStyleModifiers()

_ROLLER = ThrowStyleModifiers(is_roller=True, distance_factor=1.2)
_APPROACH = ThrowStyleModifiers(
    turn_multiplier=0.7, fade_multiplier=1.1, height_peak_position=0.35,
    distance_factor=0.4, height_factor=0.5,
)
_PUTT = ThrowStyleModifiers(
    turn_multiplier=0.5, fade_multiplier=0.5, height_peak_position=0.3,
    distance_factor=0.4, height_factor=0.3,
)

# Styles that are not rollers, approaches or putts
_NAMED_MODIFIERS = {
    "tomahawk": ThrowStyleModifiers(
        is_vertical=True, vertical_drift=-0.8, height_peak_position=0.3,
        height_factor=2.0,
    ),
    "thumber": ThrowStyleModifiers(
        is_vertical=True, vertical_drift=0.8, height_peak_position=0.3,
        height_factor=2.0,
    ),
    "grenade": ThrowStyleModifiers(
        is_vertical=True, vertical_drift=0.2, height_factor=2.5,
    ),
    "vertical_backhand": ThrowStyleModifiers(
        is_vertical=True, vertical_drift=0.2, height_factor=2.5,
        distance_factor=0.6,
    ),
    "backhand_hyzerflip": ThrowStyleModifiers(
        turn_multiplier=1.5, fade_multiplier=0.7, height_peak_position=0.5,
        distance_factor=1.05,
    ),
    "forehand_flex": ThrowStyleModifiers(
        turn_multiplier=1.3, fade_multiplier=1.3, distance_factor=1.1,
    ),
    "float_shot": ThrowStyleModifiers(
        turn_multiplier=0.3, fade_multiplier=0.8, height_peak_position=0.25,
        height_factor=1.5,
    ),
}

_APPROACH_STYLES = frozenset({"forehand_approach", "backhand_approach"})
_PUTT_STYLES = frozenset({"push_putt", "spin_putt", "hybrid_putt", "turbo_putt"})


def _modifiers_for(style: ThrowStyle) -> ThrowStyleModifiers:
    if "roller" in style.id:
        return _ROLLER
    if style.id in _APPROACH_STYLES:
        return _APPROACH
    if style.id in _PUTT_STYLES:
        return _PUTT
    return _NAMED_MODIFIERS.get(style.id, DEFAULT_MODIFIERS)


def _build_modifier_table() -> dict[str, ThrowStyleModifiers]:
    table = {}
    for category in THROW_STYLE_CATEGORIES:
        for style in category.styles:
            table[style.id] = _modifiers_for(style)
    return table


THROW_STYLE_MODIFIERS = _build_modifier_table()


def get_throw_style_modifiers(style_id: str) -> ThrowStyleModifiers:
    """Flight-model modifiers for a style.

    Unknown ids containing "roller" fly as rollers; other unknown ids get
    the defaults.
    """
    modifiers = THROW_STYLE_MODIFIERS.get(style_id)
    if modifiers is None and "roller" in style_id:
        logger.debug(f"Unknown throw style '{style_id}', using roller modifiers")
        return _ROLLER
    if modifiers is None:
        logger.debug(f"Unknown throw style '{style_id}', using default modifiers")
        return DEFAULT_MODIFIERS
    return modifiers


def get_throw_style(style_id: str) -> Optional[ThrowStyle]:
    for category in THROW_STYLE_CATEGORIES:
        for style in category.styles:
            if style.id == style_id:
                return style
    return None


def get_throw_style_category(category_id: str) -> Optional[ThrowStyleCategory]:
    for category in THROW_STYLE_CATEGORIES:
        if category.id == category_id:
            return category
    return None

