"""HTTP client for the remote text generation endpoint."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import httpx

from app.core.config import GenerationSettings

from .exceptions import UpstreamGenerationError
from .models import GenerationParameters

logger = logging.getLogger(__name__)


class TextGenerationClient(Protocol):
    async def generate_text(self, prompt: str) -> str:
        ...


def _extract_generated_text(data: Any) -> str:
    if isinstance(data, list):
        data = data[0] if data else {}
    if isinstance(data, dict):
        text = data.get("generated_text") or ""
        return text if isinstance(text, str) else ""
    return ""


class HuggingFaceClient:
    """Calls a Hugging Face style inference endpoint.

    Every failure (an invalid endpoint URL, transport error, timeout, non-2xx
    status or an unreadable body) surfaces as ``UpstreamGenerationError``.
    No retries are attempted.
    """

    def __init__(
        self,
        endpoint_url: str,
        api_key: str,
        *,
        parameters: Optional[GenerationParameters] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.endpoint_url = endpoint_url
        self._api_key = api_key
        self.parameters = parameters or GenerationParameters()
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: GenerationSettings,
        api_key: str,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "HuggingFaceClient":
        return cls(
            settings.endpoint_url,
            api_key,
            parameters=GenerationParameters(
                max_length=settings.max_length,
                temperature=settings.temperature,
                repetition_penalty=settings.repetition_penalty,
            ),
            timeout=settings.timeout_seconds,
            transport=transport,
        )

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def _payload(self, prompt: str) -> dict[str, Any]:
        return {
            "inputs": prompt,
            "parameters": {
                "max_length": self.parameters.max_length,
                "temperature": self.parameters.temperature,
                "repetition_penalty": self.parameters.repetition_penalty,
                "return_full_text": False,
            },
        }

    async def generate_text(self, prompt: str) -> str:
        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self._transport) as client:
                response = await client.post(self.endpoint_url, json=self._payload(prompt), headers=self._headers)
        except httpx.TimeoutException as exc:
            raise UpstreamGenerationError(f"generation endpoint timed out after {self.timeout}s") from exc
        except httpx.HTTPError as exc:
            raise UpstreamGenerationError(f"generation endpoint unreachable: {exc}") from exc
        except httpx.InvalidURL as exc:
            raise UpstreamGenerationError(f"generation endpoint URL is invalid: {exc}") from exc

        if not response.is_success:
            raise UpstreamGenerationError(f"generation endpoint returned {response.status_code}")

        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamGenerationError("generation endpoint returned a non-JSON body") from exc

        text = _extract_generated_text(data)
        logger.debug("Generation endpoint returned %d characters", len(text))
        return text
