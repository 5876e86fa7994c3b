"""Public exports for the account domain."""

from .exceptions import AccountAlreadyExistsError, AccountError, InvalidCredentialsError
from .models import User, UserCreateInput
from .repository import UserRepository
from .service import AccountService

__all__ = [
    "AccountAlreadyExistsError",
    "AccountError",
    "AccountService",
    "InvalidCredentialsError",
    "User",
    "UserCreateInput",
    "UserRepository",
]
