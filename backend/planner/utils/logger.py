import sys

from loguru import logger

from planner.config import LOG_LEVEL

# Remove default handler and add a structured one
logger.remove()
logger.add(
    sys.stderr,
    format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
    level=LOG_LEVEL,
)


def preview(text: str, limit: int = 300) -> str:
    """Single-line, truncated view of model output for log messages."""
    if not text:
        return ""
    flat = " ".join(text.split())
    if len(flat) <= limit:
        return flat
    return f"{flat[:limit]}... ({len(text)} chars)"


__all__ = ["logger", "preview"]
