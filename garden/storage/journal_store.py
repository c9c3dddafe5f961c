"""Journal history record (most recent first, never pruned)"""
import json
import logging
from typing import List

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from garden.config import JOURNAL_STORAGE_KEY
from garden.models.journal import JournalEntry
from garden.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

_entries_adapter = TypeAdapter(List[JournalEntry])


class JournalStore:
    """Separate record for saved journal entries"""

    def __init__(self, backend: KeyValueStore, key: str = JOURNAL_STORAGE_KEY):
        self.backend = backend
        self.key = key

    def entries(self) -> List[JournalEntry]:
        raw = self.backend.get(self.key)
        if raw is None:
            return []
        try:
            return _entries_adapter.validate_python(json.loads(raw))
        except (json.JSONDecodeError, PydanticValidationError) as e:
            logger.warning(f"Journal history under {self.key} is unreadable, treating as empty: {e}")
            return []

    def recent(self, limit: int = 5) -> List[JournalEntry]:
        return self.entries()[:limit]

    def add(self, date_label: str, text: str) -> JournalEntry:
        """Prepend an entry and persist the whole history"""
        entry = JournalEntry(date=date_label, text=text)
        history = [entry] + self.entries()
        self.backend.set(
            self.key,
            json.dumps([e.model_dump() for e in history], ensure_ascii=False),
        )
        logger.info(f"Saved journal entry ({len(text)} chars), {len(history)} total")
        return entry

    def clear(self) -> None:
        self.backend.remove(self.key)
