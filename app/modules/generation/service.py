"""Script generation with per-field fallback to curated copy."""

from __future__ import annotations

import logging
import random
from typing import Optional

from . import fallbacks
from .client import TextGenerationClient
from .exceptions import GenerationError
from .models import GeneratedScript, GenerationRequest
from .prompts import build_prompt, parse_sections, strip_prompt_echo

logger = logging.getLogger(__name__)


class ScriptGenerationService:
    """Turns a content brief into a hook, body and call-to-action.

    Remote failures never reach the caller. Each section that the remote
    output does not provide is filled independently from the fallback lists,
    so a partially usable answer keeps its usable parts.
    """

    def __init__(self, client: Optional[TextGenerationClient], *, rng: Optional[random.Random] = None) -> None:
        self._client = client
        self._rng = rng or random.Random()

    async def generate(self, request: GenerationRequest) -> GeneratedScript:
        text = await self._fetch_remote_text(request)
        sections = parse_sections(text)

        hook = sections["hook"]
        if hook is None:
            logger.debug("No HOOK section in generated text, using fallback")
            hook = fallbacks.fallback_hook(request.niche, self._rng)
        body = sections["body"]
        if body is None:
            logger.debug("No BODY section in generated text, using fallback")
            body = fallbacks.fallback_body(self._rng)
        cta = sections["cta"]
        if cta is None:
            logger.debug("No CTA section in generated text, using fallback")
            cta = fallbacks.fallback_cta(self._rng)

        return GeneratedScript(hook=hook, body=body, cta=cta)

    async def _fetch_remote_text(self, request: GenerationRequest) -> str:
        if self._client is None:
            return ""
        prompt = build_prompt(request)
        try:
            text = await self._client.generate_text(prompt)
        except GenerationError as exc:
            logger.warning("Remote script generation failed, using fallback copy: %s", exc)
            return ""
        return strip_prompt_echo(text, prompt)
