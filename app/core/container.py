"""Dependency container wiring repositories and services for one application."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from app.core.config import Settings, get_settings
from app.core.security import TokenIssuer
from app.infrastructure.database import Database
from app.infrastructure.database.repositories import SqlScriptRepository, SqlUserRepository
from app.infrastructure.memory import InMemoryScriptRepository, InMemoryUserRepository
from app.modules.accounts import AccountService, UserRepository
from app.modules.analytics import AnalyticsService
from app.modules.generation import HuggingFaceClient, ScriptGenerationService, TextGenerationClient
from app.modules.scripts import ScriptRepository, ScriptService

logger = logging.getLogger(__name__)

# Distinguishes "build the client from settings" from an explicit None.
_FROM_SETTINGS = object()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    users: UserRepository
    scripts: ScriptRepository
    token_issuer: TokenIssuer
    account_service: AccountService
    script_service: ScriptService
    generation_service: ScriptGenerationService
    analytics_service: AnalyticsService
    database: Optional[Database] = None

    async def startup(self) -> None:
        if self.database is not None:
            await self.database.create_all()

    async def shutdown(self) -> None:
        if self.database is not None:
            await self.database.dispose()


def build_container(
    settings: Optional[Settings] = None,
    *,
    rng: Optional[random.Random] = None,
    generation_client: Optional[TextGenerationClient] | object = _FROM_SETTINGS,
    clock: Callable[[], datetime] = _utcnow,
) -> ApplicationContainer:
    """Create a fully wired container.

    ``generation_client`` defaults to a Hugging Face client when an API key is
    configured, otherwise remote generation is disabled and only fallback copy
    is served. Pass ``None`` or a stub to override.
    """
    settings = settings or get_settings()
    rng = rng or random.Random()

    database: Optional[Database] = None
    if settings.storage.backend == "sql":
        database = Database.from_settings(settings.storage, debug=settings.debug)
        users: UserRepository = SqlUserRepository(database, clock=clock)
        scripts: ScriptRepository = SqlScriptRepository(database, clock=clock)
    else:
        users = InMemoryUserRepository(clock=clock)
        scripts = InMemoryScriptRepository(clock=clock)

    if generation_client is _FROM_SETTINGS:
        api_key = settings.generation_api_key
        if api_key is None:
            logger.warning("No generation API key configured; scripts will use fallback copy only")
            generation_client = None
        else:
            generation_client = HuggingFaceClient.from_settings(settings.generation, api_key)

    return ApplicationContainer(
        settings=settings,
        users=users,
        scripts=scripts,
        token_issuer=TokenIssuer.from_settings(settings),
        account_service=AccountService(users, bcrypt_rounds=settings.security.bcrypt_rounds),
        script_service=ScriptService(scripts, rng=rng),
        generation_service=ScriptGenerationService(generation_client, rng=rng),
        analytics_service=AnalyticsService(scripts, clock=clock),
        database=database,
    )


__all__ = ["ApplicationContainer", "build_container"]
