"""Session token helpers: JWT encode/decode."""

from datetime import datetime, timezone

from jose import JWTError, jwt

from shopdesk.config import Settings
from shopdesk.session import Session
from shopdesk.utils import AuthenticationError


def create_session_token(data: dict, settings: Settings) -> str:
    """
    Sign a token for a new session.

    Expected payload keys (set by AuthService): sub, email, role.
    No "exp" claim: sessions last until logout.
    """
    to_encode = data.copy()
    to_encode["iat"] = int(datetime.now(timezone.utc).timestamp())
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_session_token(token: str, settings: Settings) -> dict:
    """Decode and verify a session token. Raises 401 on failure."""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        raise AuthenticationError("Invalid session token")


def token_matches_session(session: Session, settings: Settings) -> bool:
    """True when the session's token verifies and its claims match the session fields."""
    if not session.token:
        return False
    try:
        claims = jwt.decode(session.token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return False
    return (
        claims.get("sub") == session.id
        and claims.get("email") == session.email
        and claims.get("role") == session.role.value
    )
