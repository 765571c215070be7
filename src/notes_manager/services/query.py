"""Pure filtering, tag indexing and tabular export over note collections."""

from __future__ import annotations

from typing import Iterable, List, Sequence

import pandas as pd

from notes_manager.schema import Note

EXPORT_COLUMNS = ["id", "title", "content", "tag", "created", "updated"]


def _matches_text(note: Note, needle: str) -> bool:
    if not needle:
        return True
    return needle in note.title.lower() or needle in note.content.lower()


def _matches_tag(note: Note, tag: str) -> bool:
    # Empty filter means "all tags", not "untagged only".
    return not tag or note.tag == tag


def query_notes(notes: Iterable[Note], text: str = "", tag: str = "") -> List[Note]:
    """
    Filter notes by free text and exact tag, most recently updated first.

    Text matches title or content case-insensitively; blank text matches all.
    The input is never mutated and ties keep their input order.
    """
    needle = str(text or "").strip().lower()
    tag_txt = str(tag or "")
    filtered = [n for n in notes if _matches_text(n, needle) and _matches_tag(n, tag_txt)]
    return sorted(filtered, key=lambda n: n.updated, reverse=True)


def distinct_tags(notes: Iterable[Note]) -> List[str]:
    """Non-empty tags in use, deduplicated and sorted alphabetically."""
    tags = {n.tag for n in notes if n.tag}
    return sorted(tags, key=lambda t: (t.casefold(), t))


def notes_to_dataframe(notes: Sequence[Note]) -> pd.DataFrame:
    """Tabular view of notes with timestamps parsed as UTC datetimes."""
    rows = [n.model_dump() for n in notes]
    if not rows:
        return pd.DataFrame(columns=EXPORT_COLUMNS)
    df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
    for col in ["created", "updated"]:
        df[col] = pd.to_datetime(df[col], unit="ms", utc=True, errors="coerce")
    return df


def notes_to_csv_bytes(notes: Sequence[Note], *, encoding: str = "utf-8") -> bytes:
    df = notes_to_dataframe(notes)
    csv: str = df.to_csv(index=False)
    return csv.encode(encoding, errors="replace")
