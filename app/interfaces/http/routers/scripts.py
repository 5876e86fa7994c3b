"""Script generation and saved-script endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status

from app.interfaces.http.deps import get_current_token, get_generation_service, get_script_service
from app.modules.generation import GenerationRequest, ScriptGenerationService
from app.modules.scripts import ScriptDraft, ScriptNotFoundError, ScriptService, ScriptValidationError
from app.schemas import (
    GeneratedScriptResponse,
    MessageResponse,
    ScriptGenerateRequest,
    ScriptResponse,
    ScriptSaveRequest,
    ScriptUpdateRequest,
    TokenData,
)

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Script not found")


@router.post("/generate", response_model=GeneratedScriptResponse, summary="Generate a hook, body and CTA")
async def generate_script(
    payload: ScriptGenerateRequest,
    _: TokenData = Depends(get_current_token),
    generation_service: ScriptGenerationService = Depends(get_generation_service),
) -> GeneratedScriptResponse:
    generated = await generation_service.generate(
        GenerationRequest(
            niche=payload.niche,
            content_type=payload.content_type,
            tone=payload.tone,
            length=payload.length,
            notes=payload.notes,
        )
    )
    return GeneratedScriptResponse.model_validate(generated)


@router.post("/save", response_model=ScriptResponse, summary="Save a generated script")
async def save_script(
    payload: ScriptSaveRequest,
    token: TokenData = Depends(get_current_token),
    script_service: ScriptService = Depends(get_script_service),
) -> ScriptResponse:
    try:
        script = await script_service.save_script(ScriptDraft(**payload.model_dump()), token.user_id)
    except ScriptValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return ScriptResponse.model_validate(script)


@router.get("", response_model=list[ScriptResponse], summary="List my scripts, newest first")
async def list_scripts(
    token: TokenData = Depends(get_current_token),
    script_service: ScriptService = Depends(get_script_service),
) -> list[ScriptResponse]:
    scripts = await script_service.list_scripts(token.user_id)
    return [ScriptResponse.model_validate(script) for script in scripts]


@router.put("/{script_id}", response_model=ScriptResponse, summary="Update fields of one of my scripts")
async def update_script(
    script_id: str,
    payload: ScriptUpdateRequest,
    token: TokenData = Depends(get_current_token),
    script_service: ScriptService = Depends(get_script_service),
) -> ScriptResponse:
    try:
        script = await script_service.update_script(
            script_id,
            token.user_id,
            payload.model_dump(exclude_unset=True),
        )
    except ScriptNotFoundError as exc:
        raise _not_found() from exc
    except ScriptValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return ScriptResponse.model_validate(script)


@router.delete("/{script_id}", response_model=MessageResponse, summary="Delete one of my scripts")
async def delete_script(
    script_id: str,
    token: TokenData = Depends(get_current_token),
    script_service: ScriptService = Depends(get_script_service),
) -> MessageResponse:
    try:
        await script_service.delete_script(script_id, token.user_id)
    except ScriptNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Script not found or unauthorized",
        ) from exc
    return MessageResponse(message="Script deleted successfully")
