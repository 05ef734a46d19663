from .schemas import Role, Session
from .store import DEFAULT_STORAGE_KEY, SessionStore, get_session_store

__all__ = [
    "Role",
    "Session",
    "DEFAULT_STORAGE_KEY",
    "SessionStore",
    "get_session_store",
]
