"""Repository protocol for user accounts."""

from __future__ import annotations

from typing import Protocol

from .models import User


class UserRepository(Protocol):
    """Abstract storage for user records.

    Implementations guarantee that email and username are each unique across
    all records: ``create_user`` raises ``AccountAlreadyExistsError`` rather
    than storing a duplicate, even when two creations race.
    """

    async def get_by_id(self, user_id: str) -> User | None:
        ...

    async def get_by_email(self, email: str) -> User | None:
        ...

    async def get_by_username(self, username: str) -> User | None:
        ...

    async def create_user(
        self,
        *,
        email: str,
        username: str,
        password_hash: str,
        full_name: str,
    ) -> User:
        ...

    async def count(self) -> int:
        ...
