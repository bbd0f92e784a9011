"""
Logging configuration.

Log records go to stderr so that stdout only carries evaluation results. The
record format is chosen by ``LOG_FORMAT``: ``text`` for people, ``json`` for
log collectors. Structured context is passed as ``extra={"extra_data": {...}}``.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import Settings, get_settings

DEFAULT_LEVEL = logging.WARNING


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, with ``extra_data`` merged in"""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "source": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        payload.update(getattr(record, "extra_data", {}))

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


class TextFormatter(logging.Formatter):
    """``time - logger - LEVEL - message`` lines"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


FORMATTERS = {
    "text": TextFormatter,
    "json": StructuredFormatter,
}


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number, WARNING if unknown."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else DEFAULT_LEVEL


def _build_handlers(settings: Settings) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))
    return handlers


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger from settings.

    Args:
        level: Level name overriding the configured LOG_LEVEL
    """
    settings = get_settings()
    log_level = resolve_level(level or settings.LOG_LEVEL)
    formatter = FORMATTERS[settings.LOG_FORMAT]()

    handlers = _build_handlers(settings)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(log_level)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
