"""
Device-local persistence

- KeyValueStore backends (file, memory)
- ProfileStore: the progression record
- JournalStore: journal history record
- PreferencesStore: mute and theme flags
"""

from garden.storage.kv_store import KeyValueStore, FileKeyValueStore, MemoryKeyValueStore
from garden.storage.profile_store import ProfileStore
from garden.storage.journal_store import JournalStore
from garden.storage.preferences import PreferencesStore

__all__ = [
    "KeyValueStore",
    "FileKeyValueStore",
    "MemoryKeyValueStore",
    "ProfileStore",
    "JournalStore",
    "PreferencesStore",
]
