"""Root logging for the preferences window.

Plain text to stdout by default, JSON lines with ``LOG_JSON``, plus a rotating
``prefs.log`` under the state dir unless ``LOG_FILE=0``.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

from prefs_app.core.paths import get_app_state_dir

LOG_FILE_NAME = "prefs.log"
_PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Record attributes passed through ``extra=`` by the store, page registry and event bus.
CONTEXT_FIELDS = ("key", "page", "resource", "event_type", "handler")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


class JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),  # noqa: UP017
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update({key: getattr(record, key) for key in CONTEXT_FIELDS if hasattr(record, key)})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _rotating_file_handler(state_dir: Path) -> logging.Handler | None:
    logs_dir = state_dir / "logs"
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(logs_dir / LOG_FILE_NAME, maxBytes=256 * 1024, backupCount=2, encoding="utf-8")
    except OSError as exc:
        print(f"prefs: file logging disabled ({exc})", file=sys.stderr)
        return None
    handler.setFormatter(logging.Formatter(_PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    *,
    level: str | int | None = None,
    json_logs: bool | None = None,
    log_to_file: bool | None = None,
    state_dir: Path | None = None,
) -> None:
    """Replace the root handlers. Arguments left as None fall back to ``LOG_LEVEL``, ``LOG_JSON`` and ``LOG_FILE``."""
    lvl = level if level is not None else os.getenv("LOG_LEVEL", "INFO")
    if isinstance(lvl, str):
        lvl = getattr(logging, lvl.upper(), logging.INFO)
    if json_logs is None:
        json_logs = _env_flag("LOG_JSON", "0")
    if log_to_file is None:
        log_to_file = _env_flag("LOG_FILE", "1")

    stream_handler = logging.StreamHandler(stream=sys.stdout)
    stream_handler.setFormatter(JsonLineFormatter() if json_logs else logging.Formatter(_PLAIN_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(stream_handler)
    if log_to_file:
        file_handler = _rotating_file_handler(state_dir or get_app_state_dir())
        if file_handler is not None:
            root.addHandler(file_handler)
    root.setLevel(int(lvl))
