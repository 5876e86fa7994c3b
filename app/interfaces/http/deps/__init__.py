"""Reusable FastAPI dependencies."""

from .account import get_current_token
from .container import (
    get_account_service,
    get_analytics_service,
    get_container,
    get_feed_limit,
    get_generation_service,
    get_script_service,
    get_token_issuer,
)

__all__ = [
    "get_account_service",
    "get_analytics_service",
    "get_container",
    "get_current_token",
    "get_feed_limit",
    "get_generation_service",
    "get_script_service",
    "get_token_issuer",
]
