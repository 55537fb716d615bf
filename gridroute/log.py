# gridroute/log.py
from __future__ import annotations
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

def setup_logger(level: str = "INFO", log_dir: Optional[str] = None):
    """Replace loguru's default sink with a coloured stderr sink, plus a daily file if `log_dir` is set."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
               "<level>{message}</level>",
        level=level,
        colorize=True,
    )
    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        logger.add(
            path / "gridroute_{time:YYYY-MM-DD}.log",
            rotation="00:00",
            retention="7 days",
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        )
    return logger
