import logging
import sys

from app.core.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure the root logger for the application."""
    level = logging.DEBUG if settings.debug else logging.getLevelName(settings.logging.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=settings.logging.format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("fastapi").setLevel(logging.INFO)
