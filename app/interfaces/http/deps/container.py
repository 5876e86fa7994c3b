"""Service providers resolved from the application container."""

from fastapi import Depends, Request

from app.core.container import ApplicationContainer
from app.core.security import TokenIssuer
from app.modules.accounts import AccountService
from app.modules.analytics import AnalyticsService
from app.modules.generation import ScriptGenerationService
from app.modules.scripts import ScriptService


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_token_issuer(container: ApplicationContainer = Depends(get_container)) -> TokenIssuer:
    return container.token_issuer


def get_account_service(container: ApplicationContainer = Depends(get_container)) -> AccountService:
    return container.account_service


def get_script_service(container: ApplicationContainer = Depends(get_container)) -> ScriptService:
    return container.script_service


def get_generation_service(container: ApplicationContainer = Depends(get_container)) -> ScriptGenerationService:
    return container.generation_service


def get_analytics_service(container: ApplicationContainer = Depends(get_container)) -> AnalyticsService:
    return container.analytics_service


def get_feed_limit(container: ApplicationContainer = Depends(get_container)) -> int:
    return container.settings.community.feed_limit


__all__ = [
    "get_account_service",
    "get_analytics_service",
    "get_container",
    "get_feed_limit",
    "get_generation_service",
    "get_script_service",
    "get_token_issuer",
]
