"""Clock, identifier and logging helpers shared by storage, services and UI code."""

from __future__ import annotations

import logging
import secrets
import time
from datetime import datetime, timezone

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def now_ms() -> int:
    """Current wall-clock time as integer epoch milliseconds."""
    return int(time.time() * 1000)


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def random_base36(length: int = 5) -> str:
    return "".join(secrets.choice(_BASE36) for _ in range(max(length, 0)))


def new_note_id(created_ms: int) -> str:
    """Opaque note id: creation millis followed by five random base-36 chars."""
    return f"{int(created_ms)}{random_base36(5)}"


def format_epoch_ms(value: int, *, fmt: str = "%Y-%m-%d %H:%M") -> str:
    """Render epoch millis as a local date/time label."""
    try:
        return datetime.fromtimestamp(int(value) / 1000).strftime(fmt)
    except (OverflowError, OSError, ValueError):
        return ""


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger (idempotent)."""
    logger = logging.getLogger("notes_manager")
    resolved = logging.getLevelName(str(level or "INFO").strip().upper())
    logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    if not any(getattr(h, "_notes_manager_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._notes_manager_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
