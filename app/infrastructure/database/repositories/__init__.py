"""SQLAlchemy-backed repository implementations."""

from .script_repository import SqlScriptRepository
from .user_repository import SqlUserRepository

__all__ = [
    "SqlScriptRepository",
    "SqlUserRepository",
]
