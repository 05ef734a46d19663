from .settings import Settings, settings
from .storage import (
    KeyValueStorage,
    MemoryStorage,
    FileStorage,
    MongoStorage,
    build_storage,
)

__all__ = [
    "Settings",
    "settings",
    "KeyValueStorage",
    "MemoryStorage",
    "FileStorage",
    "MongoStorage",
    "build_storage",
]
