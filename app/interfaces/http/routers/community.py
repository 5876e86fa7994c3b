"""Public community feed."""
from fastapi import APIRouter, Depends

from app.interfaces.http.deps import get_feed_limit, get_script_service
from app.modules.scripts import ScriptService
from app.schemas import CommunityScriptResponse, ScriptResponse

router = APIRouter()


@router.get("/scripts", response_model=list[CommunityScriptResponse], summary="Most liked community scripts")
async def community_scripts(
    limit: int = Depends(get_feed_limit),
    service: ScriptService = Depends(get_script_service),
) -> list[CommunityScriptResponse]:
    items = await service.community_feed(limit=limit)
    return [
        CommunityScriptResponse(
            id=item.entry.id,
            script_id=item.entry.script_id,
            anonymous_username=item.entry.anonymous_username,
            likes=item.entry.likes,
            shares=item.entry.shares,
            is_visible=item.entry.is_visible,
            created_at=item.entry.created_at,
            script=ScriptResponse.model_validate(item.script),
        )
        for item in items
    ]
