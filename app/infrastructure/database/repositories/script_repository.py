"""SQLAlchemy implementation of the script repository."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Sequence

from sqlalchemy import delete, select

from app.infrastructure.database.models import CommunityScriptModel, ScriptModel
from app.infrastructure.database.session import Database
from app.modules.scripts.models import CommunityEntry, CommunityFeedItem, Script, ScriptCreateInput
from app.modules.scripts.repository import ScriptRepository

from .user_repository import as_utc


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SqlScriptRepository(ScriptRepository):
    def __init__(self, database: Database, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._database = database
        self._clock = clock

    async def create(self, payload: ScriptCreateInput) -> Script:
        now = self._clock()
        model = ScriptModel(
            user_id=payload.user_id,
            title=payload.title,
            niche=payload.niche,
            content_type=payload.content_type,
            tone=payload.tone,
            length=payload.length,
            notes=payload.notes,
            hook=payload.hook,
            body=payload.body,
            cta=payload.cta,
            is_favorite=payload.is_favorite,
            created_at=now,
            updated_at=now,
        )
        async with self._database.session() as session:
            session.add(model)
            await session.flush()
            await session.refresh(model)
            return self._to_domain(model)

    async def get_by_id(self, script_id: str) -> Script | None:
        async with self._database.session() as session:
            model = await session.get(ScriptModel, script_id)
            return self._to_domain(model) if model is not None else None

    async def list_by_user(self, user_id: str) -> Sequence[Script]:
        stmt = (
            select(ScriptModel)
            .where(ScriptModel.user_id == user_id)
            .order_by(ScriptModel.created_at.desc(), ScriptModel.id.desc())
        )
        async with self._database.session() as session:
            result = await session.execute(stmt)
            return [self._to_domain(model) for model in result.scalars().all()]

    async def update(self, script_id: str, changes: Mapping[str, Any]) -> Script | None:
        async with self._database.session() as session:
            model = await session.get(ScriptModel, script_id, with_for_update=True)
            if model is None:
                return None
            for name, value in changes.items():
                setattr(model, name, value)
            model.updated_at = self._clock()
            await session.flush()
            await session.refresh(model)
            return self._to_domain(model)

    async def delete(self, script_id: str, user_id: str) -> bool:
        async with self._database.session() as session:
            owned = await session.execute(
                select(ScriptModel.id).where(ScriptModel.id == script_id, ScriptModel.user_id == user_id)
            )
            if owned.scalar_one_or_none() is None:
                return False
            await session.execute(delete(CommunityScriptModel).where(CommunityScriptModel.script_id == script_id))
            result = await session.execute(
                delete(ScriptModel).where(ScriptModel.id == script_id, ScriptModel.user_id == user_id)
            )
            return result.rowcount > 0

    async def add_community_entry(
        self,
        *,
        script_id: str,
        anonymous_username: str,
        likes: int,
        shares: int,
        is_visible: int = 1,
    ) -> CommunityEntry:
        model = CommunityScriptModel(
            script_id=script_id,
            anonymous_username=anonymous_username,
            likes=likes,
            shares=shares,
            is_visible=is_visible,
            created_at=self._clock(),
        )
        async with self._database.session() as session:
            session.add(model)
            await session.flush()
            await session.refresh(model)
            return self._to_community_domain(model)

    async def list_community(self) -> Sequence[CommunityFeedItem]:
        stmt = (
            select(CommunityScriptModel, ScriptModel)
            .join(ScriptModel, ScriptModel.id == CommunityScriptModel.script_id)
            .where(CommunityScriptModel.is_visible == 1)
            .order_by(CommunityScriptModel.likes.desc())
        )
        async with self._database.session() as session:
            result = await session.execute(stmt)
            return [
                CommunityFeedItem(entry=self._to_community_domain(entry), script=self._to_domain(script))
                for entry, script in result.all()
            ]

    @staticmethod
    def _to_domain(model: ScriptModel) -> Script:
        return Script(
            id=str(model.id),
            user_id=model.user_id,
            title=model.title,
            niche=model.niche,
            content_type=model.content_type,
            tone=model.tone,
            length=model.length,
            hook=model.hook,
            body=model.body,
            cta=model.cta,
            notes=model.notes,
            is_favorite=int(model.is_favorite or 0),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    @staticmethod
    def _to_community_domain(model: CommunityScriptModel) -> CommunityEntry:
        return CommunityEntry(
            id=str(model.id),
            script_id=model.script_id,
            anonymous_username=model.anonymous_username,
            likes=int(model.likes),
            shares=int(model.shares),
            is_visible=int(model.is_visible),
            created_at=as_utc(model.created_at),
        )
