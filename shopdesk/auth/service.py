"""Login flow — credential match against the directory, then session start."""

from dataclasses import dataclass
from typing import Optional

from starlette.requests import Request

from shopdesk.config import Settings
from shopdesk.routing import landing_route
from shopdesk.session import Session, SessionStore
from shopdesk.utils import InvalidCredentialsError, Logger
from .credentials import (
    CREDENTIAL_DIRECTORY,
    CredentialRecord,
    CredentialRole,
    find_credential,
    first_of_role,
)
from .helpers import create_session_token

logger = Logger("auth")


@dataclass(frozen=True)
class LoginResult:
    session: Session
    redirect_to: str


class AuthService:
    def __init__(
        self,
        store: SessionStore,
        settings: Settings,
        directory: tuple[CredentialRecord, ...] = CREDENTIAL_DIRECTORY,
    ):
        self.store = store
        self.settings = settings
        self.directory = directory

    def authenticate(self, email: str, password: str) -> LoginResult:
        """
        1. Scan the directory for an exact email + password match.
        2. On a match, start the session and return the landing route.

        A miss raises InvalidCredentialsError and leaves the store untouched.
        Wrong email and wrong password are reported identically.
        """
        record = find_credential(email, password, self.directory)
        if record is None:
            logger.warning(f"Rejected login attempt for '{email}'")
            raise InvalidCredentialsError()
        return self.login_as(record)

    def login_as(self, record: CredentialRecord) -> LoginResult:
        """Start a session for a known record (also used by one-click demo logins)."""
        role = record.session_role
        token = create_session_token(
            {"sub": record.id, "email": record.email, "role": role.value},
            self.settings,
        )
        session = Session(id=record.id, email=record.email, role=role, token=token)
        self.store.login(session)
        logger.info(f"Login successful for '{record.email}' as {role.value}")
        return LoginResult(session=session, redirect_to=landing_route(role))

    def demo_record(self, role: CredentialRole) -> Optional[CredentialRecord]:
        return first_of_role(role, self.directory)

    def logout(self) -> None:
        self.store.logout()


def get_auth_service(request: Request) -> AuthService:
    """FastAPI dependency — login flow bound to the running app's store."""
    return AuthService(
        store=request.app.state.session_store,
        settings=request.app.state.settings,
    )
