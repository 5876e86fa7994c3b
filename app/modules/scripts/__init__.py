"""Public exports for the script domain."""

from .exceptions import ScriptError, ScriptNotFoundError, ScriptValidationError
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
from .service import ScriptService

__all__ = [
    "EDITABLE_FIELDS",
    "REQUIRED_FIELDS",
    "CommunityEntry",
    "CommunityFeedItem",
    "Script",
    "ScriptCreateInput",
    "ScriptDraft",
    "ScriptError",
    "ScriptNotFoundError",
    "ScriptRepository",
    "ScriptService",
    "ScriptValidationError",
]
