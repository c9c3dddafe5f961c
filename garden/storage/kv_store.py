"""
Key-value storage backends

Device-local string storage, one value per key. The file backend keeps one
file per key under the data directory and replaces it atomically, so a
reader never sees a half-written record.
"""
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from garden.config import DATA_PATH
from garden.exceptions import StorageError

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """String key-value storage interface"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass


class MemoryKeyValueStore(KeyValueStore):
    """In-memory store (tests and throwaway sessions)"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._values)


class FileKeyValueStore(KeyValueStore):
    """One file per key inside a data directory"""

    def __init__(self, data_path: Path = DATA_PATH):
        self.data_path = Path(data_path)

    def _path(self, key: str) -> Path:
        return self.data_path / key

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            # An unreadable record is treated like a missing one
            logger.warning(f"Could not read {path}: {e}")
            return None

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            self.data_path.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.data_path, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    tmp.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write {path}", key=key, operation="set", cause=e)
        logger.debug(f"Wrote {len(value)} chars to {path}")

    def remove(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to delete {path}", key=key, operation="remove", cause=e)
        logger.info(f"Removed {path}")
