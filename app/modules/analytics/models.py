"""Domain models for per-user analytics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class UserStats:
    total_scripts: int
    weekly_scripts: int
    favorite_scripts: int
    success_rate: int
