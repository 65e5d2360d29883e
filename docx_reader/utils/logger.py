"""Central logging configuration for the library."""
from __future__ import annotations

import logging
import os
from typing import Optional

_DEFAULT_LEVEL = logging.INFO
_LEVEL_ENV_VAR = "DOCX_READER_LOG_LEVEL"
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(value: Optional[str]) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant."""
    if not value:
        return _DEFAULT_LEVEL
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else _DEFAULT_LEVEL


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger with default configuration applied."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=resolve_level(os.environ.get(_LEVEL_ENV_VAR)), format=_LOG_FORMAT)
    return logger
