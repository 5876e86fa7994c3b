"""Prompt construction and section parsing for generated scripts."""

from __future__ import annotations

import re
from typing import Optional

from .models import GenerationRequest

DEFAULT_NOTES = "No additional requirements"

_SECTION_PATTERNS = {
    "hook": re.compile(r"HOOK:\s*(.*?)(?=BODY:|$)", re.DOTALL),
    "body": re.compile(r"BODY:\s*(.*?)(?=CTA:|$)", re.DOTALL),
    "cta": re.compile(r"CTA:\s*(.*)$", re.DOTALL),
}
_PLACEHOLDER = re.compile(r"^\[[^\]]*\]$")


def build_prompt(request: GenerationRequest) -> str:
    notes = request.notes.strip() if request.notes and request.notes.strip() else DEFAULT_NOTES
    return (
        f"Create an engaging social media script for {request.content_type} in the {request.niche} niche "
        f"with a {request.tone} tone, targeting {request.length} content.\n"
        "\n"
        f"Additional context: {notes}\n"
        "\n"
        "Please structure the response as:\n"
        "HOOK: [An attention-grabbing opening line that creates curiosity or addresses a pain point]\n"
        "BODY: [Main content that provides value, tells a story, or shares insights - "
        "keep it engaging and conversational]\n"
        "CTA: [A clear call-to-action that encourages engagement, follows, or specific action]\n"
        "\n"
        f"Make it unique, viral-worthy, and tailored to the {request.niche} audience."
    )


def strip_prompt_echo(text: str, prompt: str) -> str:
    """Drop a leading copy of ``prompt`` from a completion."""
    text = text or ""
    if prompt and text.startswith(prompt):
        return text[len(prompt):]
    return text


def parse_sections(text: str) -> dict[str, Optional[str]]:
    """Extract the HOOK/BODY/CTA regions of ``text``.

    Each value is the trimmed capture, or None when the label is absent, its
    region is empty or it is still a bracketed template placeholder.
    """
    sections: dict[str, Optional[str]] = {}
    for name, pattern in _SECTION_PATTERNS.items():
        match = pattern.search(text or "")
        value = match.group(1).strip() if match else ""
        if _PLACEHOLDER.match(value):
            value = ""
        sections[name] = value or None
    return sections
