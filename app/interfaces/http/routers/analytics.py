"""Per-user analytics endpoints."""
from fastapi import APIRouter, Depends

from app.interfaces.http.deps import get_analytics_service, get_current_token
from app.modules.analytics import AnalyticsService
from app.schemas import TokenData, UserStatsResponse

router = APIRouter()


@router.get("/stats", response_model=UserStatsResponse, summary="Script counters for the current user")
async def user_stats(
    token: TokenData = Depends(get_current_token),
    analytics_service: AnalyticsService = Depends(get_analytics_service),
) -> UserStatsResponse:
    stats = await analytics_service.stats_for(token.user_id)
    return UserStatsResponse.model_validate(stats)
