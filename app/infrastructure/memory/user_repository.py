"""Volatile in-memory implementation of the user repository."""

from __future__ import annotations

import asyncio
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from app.modules.accounts.exceptions import AccountAlreadyExistsError
from app.modules.accounts.models import User
from app.modules.accounts.repository import UserRepository


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryUserRepository(UserRepository):
    """User store held in process memory; contents are lost on restart."""

    def __init__(self, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._users: dict[str, User] = {}
        self._ids_by_email: dict[str, str] = {}
        self._ids_by_username: dict[str, str] = {}
        self._lock = asyncio.Lock()
        self._clock = clock

    async def get_by_id(self, user_id: str) -> User | None:
        return self._copy(self._users.get(user_id))

    async def get_by_email(self, email: str) -> User | None:
        user_id = self._ids_by_email.get(email)
        return self._copy(self._users.get(user_id)) if user_id else None

    async def get_by_username(self, username: str) -> User | None:
        user_id = self._ids_by_username.get(username)
        return self._copy(self._users.get(user_id)) if user_id else None

    async def create_user(
        self,
        *,
        email: str,
        username: str,
        password_hash: str,
        full_name: str,
    ) -> User:
        async with self._lock:
            if email in self._ids_by_email:
                raise AccountAlreadyExistsError("email", email)
            if username in self._ids_by_username:
                raise AccountAlreadyExistsError("username", username)

            user = User(
                id=str(uuid.uuid4()),
                username=username,
                email=email,
                full_name=full_name,
                password_hash=password_hash,
                created_at=self._clock(),
            )
            self._users[user.id] = user
            self._ids_by_email[email] = user.id
            self._ids_by_username[username] = user.id
        return replace(user)

    async def count(self) -> int:
        return len(self._users)

    @staticmethod
    def _copy(user: User | None) -> User | None:
        return replace(user) if user is not None else None
