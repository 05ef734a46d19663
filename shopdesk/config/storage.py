"""
Key-value storage backends for the persisted session.

Every backend maps string keys to string values:
  - MemoryStorage : process-local dict (tests, throwaway runs)
  - FileStorage   : one JSON object file on disk
  - MongoStorage  : one document per key, {_id: key, value: str}
"""

import json
import os
from typing import Any, Optional, Protocol

from pymongo import MongoClient
from pymongo.collection import Collection

from shopdesk.utils import Logger
from .settings import Settings

logger = Logger("storage")


class KeyValueStorage(Protocol):
    def get(self, key: str) -> Optional[Any]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStorage:
    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class FileStorage:
    """
    JSON file holding a flat {key: value} object.

    The whole file is rewritten on every write. An unreadable or malformed
    file reads as empty storage. Values are returned as stored, so a
    non-string entry reaches the caller instead of being hidden.
    """

    def __init__(self, path: str):
        self.path = path

    def _read_all(self) -> dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Storage file {self.path} unreadable, treating as empty: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Storage file {self.path} is not a JSON object, treating as empty")
            return {}
        return data

    def _write_all(self, data: dict[str, Any]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, self.path)

    def get(self, key: str) -> Optional[Any]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def delete(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)


class MongoStorage:
    """Key-value entries stored as documents in a MongoDB collection."""

    def __init__(self, collection: Collection):
        self._collection = collection

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoStorage":
        if not settings.mongodb_uri:
            raise RuntimeError("MONGODB_URI must be set when STORAGE_BACKEND=mongo")
        client = MongoClient(settings.mongodb_uri)
        collection = client[settings.database_name][settings.storage_collection]
        logger.info(
            f"Using MongoDB storage [{settings.database_name}.{settings.storage_collection}]"
        )
        return cls(collection)

    def get(self, key: str) -> Optional[Any]:
        doc = self._collection.find_one({"_id": key})
        if not doc:
            return None
        return doc.get("value")

    def set(self, key: str, value: str) -> None:
        self._collection.replace_one({"_id": key}, {"_id": key, "value": value}, upsert=True)

    def delete(self, key: str) -> None:
        self._collection.delete_one({"_id": key})


def build_storage(settings: Settings) -> KeyValueStorage:
    """Instantiate the backend named by settings.storage_backend."""
    if settings.storage_backend == "memory":
        return MemoryStorage()
    if settings.storage_backend == "mongo":
        return MongoStorage.from_settings(settings)
    return FileStorage(settings.storage_path)
