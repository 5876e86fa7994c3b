"""Repository protocol for script persistence."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from .models import CommunityEntry, CommunityFeedItem, Script, ScriptCreateInput


class ScriptRepository(Protocol):
    """Abstract storage for scripts and their community feed entries."""

    async def create(self, payload: ScriptCreateInput) -> Script:
        """Store a new script with a fresh id and ``created_at == updated_at``."""
        ...

    async def get_by_id(self, script_id: str) -> Script | None:
        ...

    async def list_by_user(self, user_id: str) -> Sequence[Script]:
        """Return the user's scripts, most recently created first."""
        ...

    async def update(self, script_id: str, changes: Mapping[str, Any]) -> Script | None:
        """Merge ``changes`` into the script and refresh ``updated_at``.

        Returns None when the id is unknown.
        """
        ...

    async def delete(self, script_id: str, user_id: str) -> bool:
        """Delete the script only when ``user_id`` owns it.

        Community entries referencing the script are removed with it. Returns
        False without touching state when the script is absent or foreign.
        """
        ...

    async def add_community_entry(
        self,
        *,
        script_id: str,
        anonymous_username: str,
        likes: int,
        shares: int,
        is_visible: int = 1,
    ) -> CommunityEntry:
        ...

    async def list_community(self) -> Sequence[CommunityFeedItem]:
        """Return visible entries joined with their script, most liked first."""
        ...
