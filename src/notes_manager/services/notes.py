"""In-memory note repository with write-through persistence."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from notes_manager.repositories.notes_repo import NotesFileRepo
from notes_manager.schema import Note
from notes_manager.utils import new_note_id, now_ms

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Please provide title and content for the note."


class NoteValidationError(ValueError):
    """Raised when a note would be written with an empty title or content."""


def clean_note_fields(title: str, content: str, tag: str = "") -> Tuple[str, str, str]:
    """Trim the editable fields and reject an empty title or content."""
    title_txt = str(title or "").strip()
    content_txt = str(content or "").strip()
    tag_txt = str(tag or "").strip()
    if not title_txt or not content_txt:
        raise NoteValidationError(VALIDATION_MESSAGE)
    return title_txt, content_txt, tag_txt


class NoteRepository:
    """
    Ordered collection of notes, loaded once and saved after every mutation.

    `clock` returns epoch milliseconds and `id_factory` builds an id from the
    creation time; both are injectable so tests can pin them.
    """

    def __init__(
        self,
        persistence: NotesFileRepo,
        *,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[int], str] = new_note_id,
    ) -> None:
        self._persistence = persistence
        self._clock = clock
        self._id_factory = id_factory
        self._notes: List[Note] = persistence.load()
        self._issued_ids: set[str] = {n.id for n in self._notes}

    @property
    def notes(self) -> List[Note]:
        """Snapshot of the collection in insertion order."""
        return [n.model_copy() for n in self._notes]

    def __len__(self) -> int:
        return len(self._notes)

    def _save(self) -> None:
        self._persistence.save(self._notes)

    def _fresh_id(self, created: int) -> str:
        candidate = self._id_factory(created)
        while candidate in self._issued_ids:
            candidate = new_note_id(created)
        self._issued_ids.add(candidate)
        return candidate

    def _index_of(self, note_id: str) -> int:
        for idx, note in enumerate(self._notes):
            if note.id == note_id:
                return idx
        return -1

    def find_by_id(self, note_id: str) -> Optional[Note]:
        idx = self._index_of(str(note_id or ""))
        return self._notes[idx].model_copy() if idx >= 0 else None

    def create(self, title: str, content: str, tag: str = "") -> Note:
        title_txt, content_txt, tag_txt = clean_note_fields(title, content, tag)
        stamp = int(self._clock())
        note = Note(
            id=self._fresh_id(stamp),
            title=title_txt,
            content=content_txt,
            tag=tag_txt,
            created=stamp,
            updated=stamp,
        )
        self._notes.append(note)
        self._save()
        logger.info("Created note %s", note.id)
        return note.model_copy()

    def update(self, note_id: str, title: str, content: str, tag: str = "") -> bool:
        idx = self._index_of(str(note_id or ""))
        if idx < 0:
            return False
        try:
            title_txt, content_txt, tag_txt = clean_note_fields(title, content, tag)
        except NoteValidationError:
            return False

        current = self._notes[idx]
        # Never move `updated` backwards, even if the wall clock does.
        stamp = max(int(self._clock()), current.updated)
        self._notes[idx] = current.model_copy(
            update={"title": title_txt, "content": content_txt, "tag": tag_txt, "updated": stamp}
        )
        self._save()
        logger.info("Updated note %s", current.id)
        return True

    def delete(self, note_id: str) -> bool:
        idx = self._index_of(str(note_id or ""))
        if idx < 0:
            return False
        removed = self._notes.pop(idx)
        self._save()
        logger.info("Deleted note %s", removed.id)
        return True
