"""Session state keys and helpers for the notes page."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple

import streamlit as st

from notes_manager.config import Settings, save_settings
from notes_manager.repositories.local_store import LocalStore
from notes_manager.repositories.notes_repo import NotesFileRepo
from notes_manager.schema import Note
from notes_manager.services.notes import NoteRepository

# Canonical keys shared by the notes page, its widgets and the action handlers.
FORM_ID_KEY = "note_form_id"
FORM_TITLE_KEY = "note_form_title"
FORM_CONTENT_KEY = "note_form_content"
FORM_TAG_KEY = "note_form_tag"
SEARCH_KEY = "notes_search"
FILTER_TAG_KEY = "notes_filter_tag"
PENDING_DELETE_KEY = "notes_pending_delete"
FEEDBACK_KEY = "notes_feedback"
FILTER_BOOTSTRAPPED_KEY = "__notes_filter_bootstrapped_from_env"
REPOSITORY_KEY = "__notes_repository"
REPOSITORY_SIG_KEY = "__notes_repository_sig"

FILTER_TAG_ENV_KEY = "NOTES_FILTER_TAG"


# -------------------------
# Types
# -------------------------
@dataclass(frozen=True)
class NoteForm:
    note_id: str
    title: str
    content: str
    tag: str

    @property
    def is_edit(self) -> bool:
        return bool(self.note_id)


# -------------------------
# Repository (one per session)
# -------------------------
def _repository_signature(settings: Settings) -> Tuple[str, str]:
    return (str(Path(settings.STORE_PATH)), str(settings.NOTES_KEY))


def get_repository(settings: Settings) -> NoteRepository:
    """Load the collection once per session and reuse it across reruns."""
    sig = _repository_signature(settings)
    repo = st.session_state.get(REPOSITORY_KEY)
    if isinstance(repo, NoteRepository) and st.session_state.get(REPOSITORY_SIG_KEY) == sig:
        return repo
    store = LocalStore(Path(settings.STORE_PATH))
    repo = NoteRepository(NotesFileRepo(store, key=settings.NOTES_KEY))
    st.session_state[REPOSITORY_KEY] = repo
    st.session_state[REPOSITORY_SIG_KEY] = sig
    return repo


# -------------------------
# Form state
# -------------------------
def get_form() -> NoteForm:
    return NoteForm(
        note_id=str(st.session_state.get(FORM_ID_KEY) or ""),
        title=str(st.session_state.get(FORM_TITLE_KEY) or ""),
        content=str(st.session_state.get(FORM_CONTENT_KEY) or ""),
        tag=str(st.session_state.get(FORM_TAG_KEY) or ""),
    )


def fill_form(note: Note) -> None:
    """Load a note into the form; the hidden id switches it to edit mode."""
    st.session_state[FORM_ID_KEY] = note.id
    st.session_state[FORM_TITLE_KEY] = note.title
    st.session_state[FORM_CONTENT_KEY] = note.content
    st.session_state[FORM_TAG_KEY] = note.tag or ""


def reset_form() -> None:
    st.session_state[FORM_ID_KEY] = ""
    st.session_state[FORM_TITLE_KEY] = ""
    st.session_state[FORM_CONTENT_KEY] = ""
    st.session_state[FORM_TAG_KEY] = ""


# -------------------------
# Search / tag filter
# -------------------------
def get_search_text() -> str:
    return str(st.session_state.get(SEARCH_KEY) or "")


def set_search_text(text: str) -> None:
    st.session_state[SEARCH_KEY] = text


def get_filter_tag() -> str:
    return str(st.session_state.get(FILTER_TAG_KEY) or "")


def set_filter_tag(tag: str) -> None:
    st.session_state[FILTER_TAG_KEY] = tag


def ensure_filter_tag_valid(tags: Iterable[str]) -> str:
    """Fall back to "all tags" when the selected tag is no longer in use."""
    current = get_filter_tag()
    if current and current not in set(tags):
        current = ""
    st.session_state[FILTER_TAG_KEY] = current
    return current


def bootstrap_filter_tag_from_env(settings: Settings) -> None:
    """Hydrate the tag filter from persisted .env once per session."""
    if bool(st.session_state.get(FILTER_BOOTSTRAPPED_KEY, False)):
        return
    if FILTER_TAG_KEY not in st.session_state:
        st.session_state[FILTER_TAG_KEY] = str(getattr(settings, FILTER_TAG_ENV_KEY, "") or "")
    st.session_state[FILTER_BOOTSTRAPPED_KEY] = True


def persist_filter_tag_in_env(settings: Settings) -> bool:
    """Persist the tag filter into .env when it changes."""
    current = get_filter_tag().strip()
    persisted = str(getattr(settings, FILTER_TAG_ENV_KEY, "") or "").strip()
    if current == persisted:
        return False
    save_settings(settings.model_copy(update={FILTER_TAG_ENV_KEY: current}))
    return True


# -------------------------
# Delete confirmation / feedback
# -------------------------
def get_pending_delete() -> Optional[str]:
    pending = str(st.session_state.get(PENDING_DELETE_KEY) or "")
    return pending or None


def set_pending_delete(note_id: Optional[str]) -> None:
    st.session_state[PENDING_DELETE_KEY] = str(note_id or "")


def set_feedback(level: str, message: str) -> None:
    st.session_state[FEEDBACK_KEY] = (level, message)


def pop_feedback() -> Optional[Tuple[str, str]]:
    value = st.session_state.pop(FEEDBACK_KEY, None)
    if isinstance(value, tuple) and len(value) == 2:
        return value
    return None
