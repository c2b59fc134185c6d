import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    """Route loguru to stderr (and optionally a file). Safe to call more than once."""
    logger.remove()
    logger.add(
        sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        level=level,
        colorize=True,
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}",
            level=level,
            rotation="1 MB",
            retention=3,
            encoding="utf-8",
        )
