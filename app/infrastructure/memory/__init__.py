"""In-memory repository implementations (volatile, process lifetime only)."""

from .script_repository import InMemoryScriptRepository
from .user_repository import InMemoryUserRepository

__all__ = ["InMemoryScriptRepository", "InMemoryUserRepository"]
