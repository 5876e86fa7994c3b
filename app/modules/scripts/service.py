"""Application service handling saved scripts and the community feed."""

from __future__ import annotations

import logging
import random
from typing import Any, Mapping

from .exceptions import ScriptNotFoundError, ScriptValidationError
from .models import (
    EDITABLE_FIELDS,
    REQUIRED_FIELDS,
    CommunityEntry,
    CommunityFeedItem,
    Script,
    ScriptCreateInput,
    ScriptDraft,
)
from .repository import ScriptRepository

logger = logging.getLogger(__name__)

COMMUNITY_LIKES_RANGE = (100, 599)
COMMUNITY_SHARES_RANGE = (20, 119)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class ScriptService:
    """Encapsulates saving, listing, editing and sharing of scripts."""

    def __init__(self, repository: ScriptRepository, *, rng: random.Random | None = None) -> None:
        self._repository = repository
        self._rng = rng or random.Random()

    async def save_script(self, draft: ScriptDraft, user_id: str) -> Script:
        missing = [name for name in REQUIRED_FIELDS if _is_blank(getattr(draft, name))]
        if missing:
            raise ScriptValidationError(missing)

        script = await self._repository.create(
            ScriptCreateInput(
                user_id=user_id,
                title=draft.title,
                niche=draft.niche,
                content_type=draft.content_type,
                tone=draft.tone,
                length=draft.length,
                hook=draft.hook,
                body=draft.body,
                cta=draft.cta,
                notes=draft.notes or None,
                is_favorite=0,
            )
        )
        logger.info("Saved script %s for user %s", script.id, user_id)
        return script

    async def list_scripts(self, user_id: str) -> list[Script]:
        return list(await self._repository.list_by_user(user_id))

    async def get_script(self, script_id: str, user_id: str) -> Script:
        script = await self._repository.get_by_id(script_id)
        if script is None or script.user_id != user_id:
            raise ScriptNotFoundError(script_id)
        return script

    async def update_script(self, script_id: str, user_id: str, changes: Mapping[str, Any]) -> Script:
        await self.get_script(script_id, user_id)

        updates = {name: value for name, value in changes.items() if name in EDITABLE_FIELDS}
        blank = [name for name in REQUIRED_FIELDS if name in updates and _is_blank(updates[name])]
        if blank:
            raise ScriptValidationError(blank)
        if "is_favorite" in updates:
            if updates["is_favorite"] is None:
                raise ScriptValidationError(["is_favorite"])
            updates["is_favorite"] = 1 if updates["is_favorite"] else 0
        if "notes" in updates:
            updates["notes"] = updates["notes"] or None

        updated = await self._repository.update(script_id, updates)
        if updated is None:
            # Deleted between the ownership check and the write.
            raise ScriptNotFoundError(script_id)
        return updated

    async def delete_script(self, script_id: str, user_id: str) -> None:
        if not await self._repository.delete(script_id, user_id):
            raise ScriptNotFoundError(script_id)
        logger.info("Deleted script %s for user %s", script_id, user_id)

    async def promote_to_community(self, script_id: str, anonymous_username: str) -> CommunityEntry:
        """Publish a script to the public feed with synthetic engagement counters."""
        if await self._repository.get_by_id(script_id) is None:
            raise ScriptNotFoundError(script_id)
        return await self._repository.add_community_entry(
            script_id=script_id,
            anonymous_username=anonymous_username,
            likes=self._rng.randint(*COMMUNITY_LIKES_RANGE),
            shares=self._rng.randint(*COMMUNITY_SHARES_RANGE),
            is_visible=1,
        )

    async def community_feed(self, limit: int | None = None) -> list[CommunityFeedItem]:
        items = list(await self._repository.list_community())
        if limit is not None:
            items = items[:limit]
        return items
