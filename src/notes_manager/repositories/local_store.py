"""Durable string key-value store backed by a single JSON file."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class LocalStore:
    """
    Local key-value storage with string keys and string values.

    Every write rewrites the whole file atomically (temp file + replace), so a
    crash never leaves a half-written store behind. Reads go to disk each time;
    the last writer wins when several sessions share one file.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Local store %s is unreadable, treating it as empty: %s", self._path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Local store %s does not hold an object, treating it as empty", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        payload = json.dumps(data, ensure_ascii=False, indent=2)
        with tmp.open("w", encoding="utf-8") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        tmp.replace(self._path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = str(value)
        self._write_all(data)
