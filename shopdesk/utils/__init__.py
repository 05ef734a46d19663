from .helpers import success_response, error_response
from .logger import Logger
from .exceptions import AuthenticationError, InvalidCredentialsError, NotFoundError

__all__ = [
    "success_response",
    "error_response",
    "Logger",
    "AuthenticationError",
    "InvalidCredentialsError",
    "NotFoundError",
]
