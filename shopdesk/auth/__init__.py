from .credentials import CREDENTIAL_DIRECTORY, CredentialRecord, ROLE_MAP
from .routes import auth_router
from .service import AuthService, LoginResult, get_auth_service

__all__ = [
    "CREDENTIAL_DIRECTORY",
    "CredentialRecord",
    "ROLE_MAP",
    "auth_router",
    "AuthService",
    "LoginResult",
    "get_auth_service",
]
