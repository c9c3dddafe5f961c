"""Device preferences kept beside the profile (mute flag, colour theme)"""
import logging

from garden.config import MUTED_STORAGE_KEY, THEME_STORAGE_KEY
from garden.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")


class PreferencesStore:
    """Plain string flags, not part of the profile record"""

    def __init__(self, backend: KeyValueStore):
        self.backend = backend

    @property
    def muted(self) -> bool:
        return self.backend.get(MUTED_STORAGE_KEY) == "true"

    def toggle_mute(self) -> bool:
        """Flip the mute flag and return the new value"""
        muted = not self.muted
        self.backend.set(MUTED_STORAGE_KEY, "true" if muted else "false")
        logger.debug(f"Muted: {muted}")
        return muted

    @property
    def theme(self) -> str:
        value = self.backend.get(THEME_STORAGE_KEY)
        return value if value in THEMES else "light"

    def toggle_theme(self) -> str:
        """Switch between light and dark and return the new theme"""
        theme = "dark" if self.theme == "light" else "light"
        self.backend.set(THEME_STORAGE_KEY, theme)
        return theme
