"""Domain models for user accounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class User:
    id: str
    username: str
    email: str
    full_name: str
    password_hash: str = field(repr=False)
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class UserCreateInput:
    email: str
    username: str
    password: str = field(repr=False)
    full_name: str
