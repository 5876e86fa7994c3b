"""Domain models for saved scripts and the community feed."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

REQUIRED_FIELDS = (
    "title",
    "niche",
    "content_type",
    "tone",
    "length",
    "hook",
    "body",
    "cta",
)

# Fields a caller may change through a partial update.
EDITABLE_FIELDS = frozenset(REQUIRED_FIELDS + ("notes", "is_favorite"))


@dataclass(slots=True)
class Script:
    id: str
    user_id: str
    title: str
    niche: str
    content_type: str
    tone: str
    length: str
    hook: str
    body: str
    cta: str
    notes: Optional[str] = None
    is_favorite: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(slots=True)
class ScriptCreateInput:
    user_id: str
    title: str
    niche: str
    content_type: str
    tone: str
    length: str
    hook: str
    body: str
    cta: str
    notes: Optional[str] = None
    is_favorite: int = 0


@dataclass(slots=True)
class ScriptDraft:
    """Unvalidated save request as received from a client."""

    title: Optional[str] = None
    niche: Optional[str] = None
    content_type: Optional[str] = None
    tone: Optional[str] = None
    length: Optional[str] = None
    hook: Optional[str] = None
    body: Optional[str] = None
    cta: Optional[str] = None
    notes: Optional[str] = None


@dataclass(slots=True)
class CommunityEntry:
    id: str
    script_id: str
    anonymous_username: str
    likes: int
    shares: int
    is_visible: int = 1
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class CommunityFeedItem:
    entry: CommunityEntry
    script: Script
