"""
Preference storage for Disc Caddie.

Tuning coefficients are stored per user as JSON files under
~/.disc-caddie/preferences/<user_id>.json (the base directory can be moved
with the DISC_CADDIE_HOME environment variable). Stored values are merged
over the defaults, so older files missing newer keys still load.
"""

import abc
import json
import logging
import os
import re
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from disccaddie.errors import InvalidUserIdError, PreferenceStoreError
from disccaddie.models.request import TuningCoefficients
from disccaddie.utils.constants import DEFAULT_COEFFICIENTS

logger = logging.getLogger(__name__)

SAFE_USER_ID_RE = re.compile(r"[A-Za-z0-9_-]+")


def get_app_dir() -> Path:
    """Application data directory."""
    return Path(os.environ.get("DISC_CADDIE_HOME", Path.home() / ".disc-caddie")).expanduser()


def _check_user_id(user_id: str) -> str:
    if not SAFE_USER_ID_RE.fullmatch(user_id or ""):
        raise InvalidUserIdError(f"Invalid user id for preference storage: {user_id!r}")
    return user_id


class PreferenceStore(abc.ABC):
    """Where tuning coefficients live between sessions."""

    @abc.abstractmethod
    def get(self, user_id: str) -> Optional[TuningCoefficients]:
        """Stored coefficients for a user, or None if there are none."""

    @abc.abstractmethod
    def put(self, user_id: str, coefficients: TuningCoefficients) -> None:
        """Persist a user's coefficients, replacing what was stored."""

    def load_or_default(self, user_id: str) -> TuningCoefficients:
        stored = self.get(user_id)
        if stored is None:
            return TuningCoefficients.default()
        return stored


class InMemoryPreferenceStore(PreferenceStore):
    """Process-local store; nothing survives a restart."""

    def __init__(self):
        self._data: dict[str, dict] = {}

    def get(self, user_id: str) -> Optional[TuningCoefficients]:
        saved = self._data.get(user_id)
        if saved is None:
            return None
        return TuningCoefficients.model_validate(saved)

    def put(self, user_id: str, coefficients: TuningCoefficients) -> None:
        self._data[user_id] = coefficients.to_preferences()


class JsonPreferenceStore(PreferenceStore):
    """One JSON file per user."""

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        base = Path(base_dir) if base_dir else get_app_dir() / "preferences"
        self.base_dir = base.expanduser()

    def _path(self, user_id: str) -> Path:
        return self.base_dir / f"{_check_user_id(user_id)}.json"

    def get(self, user_id: str) -> Optional[TuningCoefficients]:
        """Load a user's coefficients, merged over the defaults.

        A corrupt or out-of-range file is logged and treated as absent.
        """
        path = self._path(user_id)
        if not path.exists():
            return None

        try:
            with open(path) as f:
                saved = json.load(f)
            if not isinstance(saved, dict):
                raise ValueError("preference file is not a JSON object")
            coefficients = TuningCoefficients.model_validate(
                {**DEFAULT_COEFFICIENTS, **saved}
            )
        except (json.JSONDecodeError, OSError, ValueError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable preferences for {user_id}: {e}")
            return None

        logger.info(f"Loaded coefficients for {user_id} from {path}")
        return coefficients

    def put(self, user_id: str, coefficients: TuningCoefficients) -> None:
        """Write the coefficients to a temp file, then swap it into place.

        A failed write leaves the previously saved file untouched.
        """
        path = self._path(user_id)
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w") as f:
                json.dump(coefficients.to_preferences(), f, indent=2)
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise PreferenceStoreError(
                f"Could not save preferences for {user_id}: {e}"
            ) from e
        logger.info(f"Saved coefficients for {user_id} to {path}")
