"""
Disc definitions for Disc Caddie.

A disc is described by its four flight numbers. A player may override any
of them with personal numbers for their own copy; the effective numbers
are the personal ones where set, the manufacturer's otherwise.
"""

from dataclasses import dataclass
from typing import Optional

from disccaddie.models.recommendation import StabilityCategory
from disccaddie.utils.constants import DISC_STABILITY_BOUNDS


@dataclass(frozen=True)
class Disc:
    """Golf disc with the flight numbers used by the flight-path model.

    Attributes:
        speed: Speed rating (1-14).
        glide: Glide rating (1-7).
        turn: High-speed turn (usually 0 to -5).
        fade: Low-speed fade (usually 0 to 5).
        name: Mold name, for display only.
        personal_speed / personal_glide / personal_turn / personal_fade:
            The player's own numbers for this copy, or None.
    """
    speed: float
    glide: float
    turn: float
    fade: float
    name: Optional[str] = None
    personal_speed: Optional[float] = None
    personal_glide: Optional[float] = None
    personal_turn: Optional[float] = None
    personal_fade: Optional[float] = None

    @property
    def effective_speed(self) -> float:
        return self.speed if self.personal_speed is None else self.personal_speed

    @property
    def effective_glide(self) -> float:
        return self.glide if self.personal_glide is None else self.personal_glide

    @property
    def effective_turn(self) -> float:
        return self.turn if self.personal_turn is None else self.personal_turn

    @property
    def effective_fade(self) -> float:
        return self.fade if self.personal_fade is None else self.personal_fade

    @property
    def stability_score(self) -> float:
        return stability_score(self.effective_turn, self.effective_fade)

    @property
    def stability_category(self) -> StabilityCategory:
        return stability_category(self.effective_turn, self.effective_fade)

    @property
    def flight_numbers(self) -> str:
        """Effective numbers as "speed | glide | turn | fade"."""
        numbers = (self.effective_speed, self.effective_glide,
                   self.effective_turn, self.effective_fade)
        return " | ".join(f"{n:g}" for n in numbers)


def stability_score(turn: float, fade: float) -> float:
    """Fade minus turn."""
    return fade - turn


def stability_category(turn: float, fade: float) -> StabilityCategory:
    """Rate a disc's stability from its turn and fade numbers."""
    score = stability_score(turn, fade)
    very_under, under, neutral, over = DISC_STABILITY_BOUNDS

    if score < very_under:
        return StabilityCategory.VERY_UNDERSTABLE
    if score < under:
        return StabilityCategory.UNDERSTABLE
    if score <= neutral:
        return StabilityCategory.NEUTRAL
    if score <= over:
        return StabilityCategory.OVERSTABLE
    return StabilityCategory.VERY_OVERSTABLE
