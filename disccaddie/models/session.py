"""
Tuning session model for Disc Caddie.

A tuning session holds one user's calculator coefficients from the moment
the calculator opens until it closes: loaded from the preference store
(or defaulted), edited in place by the pro-tune sliders, and saved back
on request.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from disccaddie.models.request import TuningCoefficients
from disccaddie.utils.config import PreferenceStore

logger = logging.getLogger(__name__)


class TuningState(str, Enum):
    """Where the session's coefficients came from."""
    DEFAULT = "default"
    LOADED = "loaded"
    EDITED = "edited"
    SAVED = "saved"


@dataclass
class TuningSession:
    """A user's coefficients for the lifetime of a calculator session.

    Attributes:
        user_id: Key in the preference store.
        store: Preference store the coefficients load from and save to.
        coefficients: Current coefficients, passed to every calculation.
        state: Lifecycle state of the coefficients.
        last_saved: When the coefficients were last persisted.
    """
    user_id: str
    store: PreferenceStore
    coefficients: TuningCoefficients = field(default_factory=TuningCoefficients.default)
    state: TuningState = TuningState.DEFAULT
    last_saved: Optional[datetime] = None

    @classmethod
    def start(cls, user_id: str, store: PreferenceStore) -> "TuningSession":
        """Open a session, loading stored coefficients when there are any."""
        session = cls(user_id=user_id, store=store)
        stored = store.get(user_id)
        if stored is not None:
            session.coefficients = stored
            session.state = TuningState.LOADED
        logger.info(f"Tuning session started for {user_id} ({session.state.value})")
        return session

    def update(self, **changes) -> TuningCoefficients:
        """Change one or more coefficients.

        Keys may be preference names (headK) or attribute names (head_k).
        Raises pydantic.ValidationError if a value is outside its range and
        KeyError for an unknown coefficient.
        """
        aliases = {name: info.alias for name, info
                   in TuningCoefficients.model_fields.items()}
        merged = self.coefficients.to_preferences()
        for key, value in changes.items():
            alias = aliases.get(key, key)
            if alias not in merged:
                raise KeyError(f"Unknown coefficient: {key}")
            merged[alias] = value
        self.coefficients = TuningCoefficients.model_validate(merged)
        self.state = TuningState.EDITED
        return self.coefficients

    def reset(self) -> TuningCoefficients:
        """Return to the default coefficients (not saved until save()).

        The session only counts as edited when the defaults differ from
        what is stored.
        """
        self.coefficients = TuningCoefficients.default()
        stored = self.store.get(self.user_id)
        if stored is None:
            self.state = TuningState.DEFAULT
        elif stored != self.coefficients:
            self.state = TuningState.EDITED
        else:
            self.state = TuningState.LOADED
        return self.coefficients

    def save(self):
        """Persist the current coefficients."""
        self.store.put(self.user_id, self.coefficients)
        self.state = TuningState.SAVED
        self.last_saved = datetime.now()

    @property
    def is_dirty(self) -> bool:
        """True when there are edits that have not been saved."""
        return self.state == TuningState.EDITED
