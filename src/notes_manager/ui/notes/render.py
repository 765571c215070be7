"""HTML projection of the filtered notes list; all user text goes through escaping."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from notes_manager.schema import Note
from notes_manager.security import escape_attr, escape_text
from notes_manager.services.query import distinct_tags, query_notes
from notes_manager.utils import format_epoch_ms

EMPTY_NOTES_MESSAGE = "No notes yet. Create your first note!"
ALL_TAGS_LABEL = "All tags"

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class NotesView:
    notes: List[Note]
    tags: List[str]

    @property
    def is_empty(self) -> bool:
        return not self.notes


def build_notes_view(notes: Sequence[Note], *, text: str = "", tag: str = "") -> NotesView:
    """Recompute the visible rows and the tag selector from the whole collection."""
    return NotesView(notes=query_notes(notes, text, tag), tags=distinct_tags(notes))


def tag_filter_options(tags: Iterable[str]) -> List[str]:
    return ["", *tags]


def tag_option_label(value: str) -> str:
    return value if value else ALL_TAGS_LABEL


def escape_multiline(value: object) -> str:
    """Escape text and keep its line breaks as `<br>` so the row stays one markdown HTML block."""
    return _LINE_BREAK_RE.sub("<br>", escape_text(value))


def note_meta_html(note: Note) -> str:
    stamp = escape_text(format_epoch_ms(note.updated))
    if note.tag:
        return f"<em>{escape_multiline(note.tag)}</em> • {stamp}"
    return stamp


def render_note_item_html(note: Note) -> str:
    return (
        f'<li class="note-item" data-id="{escape_attr(note.id)}">'
        f'<div class="note-top"><strong>{escape_multiline(note.title)}</strong></div>'
        f'<div class="note-meta">{note_meta_html(note)}</div>'
        f'<div class="note-body">{escape_multiline(note.content)}</div>'
        "</li>"
    )


def render_empty_item_html() -> str:
    return f'<li class="note-item note-empty">{escape_text(EMPTY_NOTES_MESSAGE)}</li>'


def render_notes_list_html(notes: Sequence[Note]) -> str:
    """Full list markup; an empty list renders the explicit "no notes" row."""
    if not notes:
        return f'<ul class="notes-list">{render_empty_item_html()}</ul>'
    items = "".join(render_note_item_html(n) for n in notes)
    return f'<ul class="notes-list">{items}</ul>'
