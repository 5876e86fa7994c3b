"""SQLAlchemy implementation of the user repository."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from app.infrastructure.database.models import UserModel
from app.infrastructure.database.session import Database
from app.modules.accounts.exceptions import AccountAlreadyExistsError
from app.modules.accounts.models import User
from app.modules.accounts.repository import UserRepository


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    # SQLite drops tzinfo on the way back.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlUserRepository(UserRepository):
    """User repository backed by SQLAlchemy models."""

    def __init__(self, database: Database, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._database = database
        self._clock = clock

    async def get_by_id(self, user_id: str) -> User | None:
        return await self._get_one(UserModel.id == user_id)

    async def get_by_email(self, email: str) -> User | None:
        return await self._get_one(UserModel.email == email)

    async def get_by_username(self, username: str) -> User | None:
        return await self._get_one(UserModel.username == username)

    async def create_user(
        self,
        *,
        email: str,
        username: str,
        password_hash: str,
        full_name: str,
    ) -> User:
        model = UserModel(
            email=email,
            username=username,
            password_hash=password_hash,
            full_name=full_name,
            created_at=self._clock(),
        )
        try:
            async with self._database.session() as session:
                session.add(model)
                await session.flush()
                await session.refresh(model)
                user = self._to_domain(model)
        except IntegrityError as exc:
            if await self.get_by_email(email) is not None:
                raise AccountAlreadyExistsError("email", email) from exc
            raise AccountAlreadyExistsError("username", username) from exc
        return user

    async def count(self) -> int:
        async with self._database.session() as session:
            result = await session.execute(select(func.count()).select_from(UserModel))
            return int(result.scalar_one())

    async def _get_one(self, condition) -> User | None:
        async with self._database.session() as session:
            result = await session.execute(select(UserModel).where(condition))
            model = result.scalar_one_or_none()
            return self._to_domain(model) if model is not None else None

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User(
            id=str(model.id),
            username=model.username,
            email=model.email,
            full_name=model.full_name,
            password_hash=model.password_hash,
            created_at=as_utc(model.created_at),
        )
