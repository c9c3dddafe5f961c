"""
Persisted Profile Store

Loads the profile record and shallow-merges it over the defaults, so fields
added in newer versions appear with default values for existing
installations. A record that cannot be parsed or validated is treated as
absent.
"""
import json
import logging
from typing import Callable

from pydantic import ValidationError as PydanticValidationError

from garden.config import PROFILE_STORAGE_KEY
from garden.models.profile import Profile
from garden.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


class ProfileStore:
    """Load/save the single profile record"""

    def __init__(
        self,
        backend: KeyValueStore,
        defaults_factory: Callable[[], dict],
        key: str = PROFILE_STORAGE_KEY
    ):
        """
        Args:
            backend: Key-value storage
            defaults_factory: Returns the default profile record (stored field names)
            key: Versioned storage key
        """
        self.backend = backend
        self.defaults_factory = defaults_factory
        self.key = key

    def load(self) -> Profile:
        """
        Load the profile

        Returns:
            Stored fields merged over defaults, or the defaults when the
            record is missing or corrupt
        """
        defaults = self.defaults_factory()
        raw = self.backend.get(self.key)

        if raw is None:
            logger.info(f"No stored profile under {self.key}, starting fresh")
            return Profile.model_validate(defaults)

        try:
            stored = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Stored profile under {self.key} is not valid JSON, using defaults: {e}")
            return Profile.model_validate(defaults)

        if not isinstance(stored, dict):
            logger.warning(f"Stored profile under {self.key} is a {type(stored).__name__}, using defaults")
            return Profile.model_validate(defaults)

        merged = {**defaults, **stored}
        try:
            return Profile.model_validate(merged)
        except PydanticValidationError as e:
            logger.warning(f"Stored profile under {self.key} failed validation, using defaults: {e}")
            return Profile.model_validate(defaults)

    def save(self, profile: Profile) -> None:
        """Overwrite the stored record with the full profile"""
        self.backend.set(self.key, json.dumps(profile.to_record(), ensure_ascii=False))
        logger.debug(f"Saved profile: xp={profile.xp}, level={profile.level}, streak={profile.streak}")

    def clear(self) -> None:
        self.backend.remove(self.key)
