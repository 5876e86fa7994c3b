"""Domain services for signup and login."""

from __future__ import annotations

import logging

from app.core.crypto import DEFAULT_ROUNDS, hash_password, verify_password

from .exceptions import AccountAlreadyExistsError, InvalidCredentialsError
from .models import User, UserCreateInput
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AccountService:
    """Encapsulates core account use cases."""

    def __init__(self, repository: UserRepository, *, bcrypt_rounds: int = DEFAULT_ROUNDS) -> None:
        self._repository = repository
        self._bcrypt_rounds = bcrypt_rounds

    async def get_by_id(self, user_id: str) -> User | None:
        return await self._repository.get_by_id(user_id)

    async def get_by_email(self, email: str) -> User | None:
        return await self._repository.get_by_email(email)

    async def register(self, payload: UserCreateInput) -> User:
        if await self._repository.get_by_email(payload.email) is not None:
            logger.info("Signup rejected: email already registered")
            raise AccountAlreadyExistsError("email", payload.email)
        if await self._repository.get_by_username(payload.username) is not None:
            logger.info("Signup rejected: username %s already taken", payload.username)
            raise AccountAlreadyExistsError("username", payload.username)

        password_hash = hash_password(payload.password, rounds=self._bcrypt_rounds)
        user = await self._repository.create_user(
            email=payload.email,
            username=payload.username,
            password_hash=password_hash,
            full_name=payload.full_name,
        )
        logger.info("Registered user %s", user.id)
        return user

    async def authenticate(self, email: str, password: str) -> User:
        user = await self._repository.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Login failed for unknown email or wrong password")
            raise InvalidCredentialsError("invalid email or password")
        return user
