"""Domain models for script generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class GenerationRequest:
    niche: str
    content_type: str
    tone: str
    length: str
    notes: Optional[str] = None


@dataclass(slots=True)
class GeneratedScript:
    hook: str
    body: str
    cta: str


@dataclass(slots=True)
class GenerationParameters:
    max_length: int = 500
    temperature: float = 0.8
    repetition_penalty: float = 1.1
