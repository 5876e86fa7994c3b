"""Public exports for analytics."""

from .models import UserStats
from .service import AnalyticsService, success_rate_for

__all__ = ["AnalyticsService", "UserStats", "success_rate_for"]
