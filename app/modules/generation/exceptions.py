"""Generation domain specific exceptions."""


class GenerationError(Exception):
    """Base class for script generation errors."""


class UpstreamGenerationError(GenerationError):
    """Raised by a text generation client when the remote call fails."""
