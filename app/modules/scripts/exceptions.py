"""Script domain specific exceptions."""

from typing import Sequence


class ScriptError(Exception):
    """Base class for script domain errors."""


class ScriptValidationError(ScriptError):
    """Raised when required script fields are missing or empty."""

    def __init__(self, fields: Sequence[str]) -> None:
        super().__init__(f"Missing required script data: {', '.join(fields)}")
        self.fields = list(fields)


class ScriptNotFoundError(ScriptError):
    """Raised when a script does not exist or belongs to another user.

    Both cases share one error so callers cannot probe for other users' ids.
    """
