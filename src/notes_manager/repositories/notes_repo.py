"""Persistence adapter for the note collection stored under one local-store key."""

from __future__ import annotations

import json
import logging
from typing import List, Sequence

from pydantic import ValidationError

from notes_manager.repositories.local_store import LocalStore
from notes_manager.schema import Note

logger = logging.getLogger(__name__)

DEFAULT_NOTES_KEY = "notesapp_notes_v1"


class NotesFileRepo:
    def __init__(self, store: LocalStore, key: str = DEFAULT_NOTES_KEY) -> None:
        self._store = store
        self._key = key or DEFAULT_NOTES_KEY

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> List[Note]:
        """Return stored notes in insertion order; never raises on bad data."""
        raw = self._store.get_item(self._key)
        if not raw:
            return []
        try:
            payload = json.loads(raw)
        except ValueError as exc:
            logger.warning("Failed reading notes under %r: %s", self._key, exc)
            return []
        if not isinstance(payload, list):
            logger.warning("Failed reading notes under %r: expected a list", self._key)
            return []

        notes: List[Note] = []
        seen: set[str] = set()
        for idx, row in enumerate(payload):
            try:
                note = Note.model_validate(row)
            except ValidationError as exc:
                logger.warning("Skipping malformed note at index %d: %s", idx, exc.errors()[:1])
                continue
            if note.id in seen:
                logger.warning("Skipping duplicate note id %r at index %d", note.id, idx)
                continue
            seen.add(note.id)
            notes.append(note)
        return notes

    def save(self, notes: Sequence[Note]) -> None:
        """Replace the stored collection with `notes` (full overwrite)."""
        payload = [n.model_dump() for n in notes]
        self._store.set_item(
            self._key, json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
        )
        logger.debug("Saved %d notes under %r", len(payload), self._key)
