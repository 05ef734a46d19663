"""
Session store — single source of truth for "who is logged in".

The in-memory Session is canonical. The persisted copy under
`storage_key` is a mirror written on every login/logout and read back
only once, when the store is constructed.

Mutations are serialized by a lock: handlers run in the threadpool so
storage I/O never blocks the event loop.
"""

import threading
from typing import Callable, Optional

from pydantic import ValidationError
from starlette.requests import Request

from shopdesk.config import KeyValueStorage
from shopdesk.utils import Logger
from .schemas import Session

logger = Logger("session")

SessionObserver = Callable[[Optional[Session]], None]
TokenVerifier = Callable[[Session], bool]

DEFAULT_STORAGE_KEY = "currentUser"


class SessionStore:
    def __init__(
        self,
        storage: KeyValueStorage,
        storage_key: str = DEFAULT_STORAGE_KEY,
        verify_token: Optional[TokenVerifier] = None,
    ):
        self._storage = storage
        self._storage_key = storage_key
        self._verify_token = verify_token
        self._session: Optional[Session] = None
        self._observers: list[SessionObserver] = []
        self._lock = threading.RLock()
        self._restore()

    def _restore(self) -> None:
        raw = self._storage.get(self._storage_key)
        if raw is None:
            return
        session = self._parse(raw)
        if session is None:
            self._storage.delete(self._storage_key)
            return
        self._session = session
        logger.info(f"Restored session for {session.email} ({session.role.value})")

    def _parse(self, raw) -> Optional[Session]:
        """Return the persisted Session, or None if the entry is corrupt."""
        key = self._storage_key
        if not isinstance(raw, str):
            logger.warning(
                f"Discarding corrupt persisted session under '{key}': "
                f"expected a JSON string, got {type(raw).__name__}"
            )
            return None
        try:
            session = Session.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(
                f"Discarding corrupt persisted session under '{key}': "
                f"{e.error_count()} error(s)"
            )
            return None
        if session.token and self._verify_token and not self._verify_token(session):
            logger.warning(f"Discarding persisted session under '{key}': token does not verify")
            return None
        return session

    def current(self) -> Optional[Session]:
        return self._session

    def login(self, session: Session) -> None:
        """Replace the current session unconditionally, persist it and notify."""
        with self._lock:
            self._session = session
            self._storage.set(self._storage_key, session.model_dump_json(exclude_none=True))
            logger.info(f"Session started for {session.email} ({session.role.value})")
            self._notify()

    def logout(self) -> None:
        with self._lock:
            previous = self._session
            self._session = None
            self._storage.delete(self._storage_key)
            if previous is not None:
                logger.info(f"Session ended for {previous.email}")
            self._notify()

    def subscribe(self, observer: SessionObserver) -> Callable[[], None]:
        """Register an observer; returns a callable that unsubscribes it."""
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self._session)


def get_session_store(request: Request) -> SessionStore:
    """FastAPI dependency — returns the store owned by the running app."""
    return request.app.state.session_store
