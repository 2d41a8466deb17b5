"""Package logger and structured event logging."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any

from kitchen.config import LOGGER_NAME

MAX_STR = 400
MAX_LIST = 50

_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def _sanitize(obj: Any, depth: int = 0) -> Any:
    """Make a payload JSON serialisable and keep it short."""
    if depth > 4:
        return "...(max_depth)"
    if obj is None or isinstance(obj, (bool, int, float)):
        return obj
    if isinstance(obj, str):
        return obj if len(obj) <= MAX_STR else obj[:MAX_STR] + "...(truncated)"
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, Enum):
        return obj.name
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, dict):
        return {str(k): _sanitize(v, depth + 1) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set, frozenset)):
        items = list(obj)
        out = [_sanitize(x, depth + 1) for x in items[:MAX_LIST]]
        if len(items) > MAX_LIST:
            out.append("...(truncated)")
        return out
    if isinstance(obj, Exception):
        return {"error_type": type(obj).__name__, "error_message": _sanitize(str(obj), depth + 1)}
    return _sanitize(str(obj), depth + 1)


logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.INFO)
logger.propagate = False

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(_handler)


def configure_file_logging(path: str | Path, level: int = logging.DEBUG) -> None:
    """Send package logs to `path` instead of the terminal."""
    log_path = Path(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(file_handler)
    logger.setLevel(level)


def log_event(stage: str, payload: dict[str, Any], level: int = logging.INFO) -> None:
    """One JSON object per event."""
    if not logger.isEnabledFor(level):
        return
    msg = {"stage": stage, "payload": _sanitize(payload)}
    logger.log(level, json.dumps(msg, ensure_ascii=False))
