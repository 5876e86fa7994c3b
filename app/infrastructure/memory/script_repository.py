"""Volatile in-memory implementation of the script repository."""

from __future__ import annotations

import asyncio
import itertools
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Sequence

from app.modules.scripts.models import CommunityEntry, CommunityFeedItem, Script, ScriptCreateInput
from app.modules.scripts.repository import ScriptRepository


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryScriptRepository(ScriptRepository):
    """Script and community feed store held in process memory.

    Writers are serialised by a lock. Stored records are never handed out
    directly; callers receive copies.
    """

    def __init__(self, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._scripts: dict[str, Script] = {}
        self._community: dict[str, CommunityEntry] = {}
        # Insertion sequence breaks created_at ties: later insert sorts first.
        self._sequence: dict[str, int] = {}
        self._counter = itertools.count()
        self._lock = asyncio.Lock()
        self._clock = clock

    async def create(self, payload: ScriptCreateInput) -> Script:
        now = self._clock()
        script = Script(
            id=str(uuid.uuid4()),
            user_id=payload.user_id,
            title=payload.title,
            niche=payload.niche,
            content_type=payload.content_type,
            tone=payload.tone,
            length=payload.length,
            hook=payload.hook,
            body=payload.body,
            cta=payload.cta,
            notes=payload.notes,
            is_favorite=payload.is_favorite,
            created_at=now,
            updated_at=now,
        )
        async with self._lock:
            self._scripts[script.id] = script
            self._sequence[script.id] = next(self._counter)
        return replace(script)

    async def get_by_id(self, script_id: str) -> Script | None:
        script = self._scripts.get(script_id)
        return replace(script) if script is not None else None

    async def list_by_user(self, user_id: str) -> Sequence[Script]:
        owned = [script for script in self._scripts.values() if script.user_id == user_id]
        owned.sort(key=lambda script: (script.created_at, self._sequence[script.id]), reverse=True)
        return [replace(script) for script in owned]

    async def update(self, script_id: str, changes: Mapping[str, Any]) -> Script | None:
        async with self._lock:
            current = self._scripts.get(script_id)
            if current is None:
                return None
            updated = replace(current, **dict(changes), updated_at=self._clock())
            self._scripts[script_id] = updated
        return replace(updated)

    async def delete(self, script_id: str, user_id: str) -> bool:
        async with self._lock:
            script = self._scripts.get(script_id)
            if script is None or script.user_id != user_id:
                return False
            del self._scripts[script_id]
            self._sequence.pop(script_id, None)
            for entry_id in [key for key, entry in self._community.items() if entry.script_id == script_id]:
                del self._community[entry_id]
        return True

    async def add_community_entry(
        self,
        *,
        script_id: str,
        anonymous_username: str,
        likes: int,
        shares: int,
        is_visible: int = 1,
    ) -> CommunityEntry:
        entry = CommunityEntry(
            id=str(uuid.uuid4()),
            script_id=script_id,
            anonymous_username=anonymous_username,
            likes=likes,
            shares=shares,
            is_visible=is_visible,
            created_at=self._clock(),
        )
        async with self._lock:
            self._community[entry.id] = entry
        return replace(entry)

    async def list_community(self) -> Sequence[CommunityFeedItem]:
        items = []
        for entry in self._community.values():
            if not entry.is_visible:
                continue
            script = self._scripts.get(entry.script_id)
            if script is None:
                continue
            items.append(CommunityFeedItem(entry=replace(entry), script=replace(script)))
        items.sort(key=lambda item: item.entry.likes, reverse=True)
        return items
