"""Public exports for script generation."""

from .client import HuggingFaceClient, TextGenerationClient
from .exceptions import GenerationError, UpstreamGenerationError
from .models import GeneratedScript, GenerationParameters, GenerationRequest
from .service import ScriptGenerationService

__all__ = [
    "GeneratedScript",
    "GenerationError",
    "GenerationParameters",
    "GenerationRequest",
    "HuggingFaceClient",
    "ScriptGenerationService",
    "TextGenerationClient",
    "UpstreamGenerationError",
]
