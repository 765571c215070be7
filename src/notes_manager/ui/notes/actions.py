"""Dispatch table mapping notes-page user actions to repository and state changes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict

from notes_manager.services.notes import NoteRepository, NoteValidationError, clean_note_fields
from notes_manager.services.query import distinct_tags
from notes_manager.ui.notes import state

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionResult:
    changed: bool = False
    level: str = ""
    message: str = ""


Handler = Callable[..., ActionResult]


def _after_mutation(repo: NoteRepository) -> None:
    state.ensure_filter_tag_valid(distinct_tags(repo.notes))


def _submit(repo: NoteRepository) -> ActionResult:
    form = state.get_form()
    try:
        clean_note_fields(form.title, form.content, form.tag)
    except NoteValidationError as exc:
        return ActionResult(level="error", message=str(exc))

    if form.is_edit:
        # A stale id is ignored; the row it came from was just rendered.
        changed = repo.update(form.note_id, form.title, form.content, form.tag)
        message = "Note updated." if changed else ""
    else:
        repo.create(form.title, form.content, form.tag)
        changed = True
        message = "Note saved."

    state.reset_form()
    _after_mutation(repo)
    return ActionResult(changed=changed, level="success" if changed else "", message=message)


def _edit(repo: NoteRepository, note_id: str = "") -> ActionResult:
    note = repo.find_by_id(note_id)
    if note is None:
        return ActionResult()
    state.fill_form(note)
    state.set_pending_delete(None)
    return ActionResult()


def _clear(repo: NoteRepository) -> ActionResult:
    state.reset_form()
    return ActionResult()


def _request_delete(repo: NoteRepository, note_id: str = "") -> ActionResult:
    if repo.find_by_id(note_id) is None:
        return ActionResult()
    state.set_pending_delete(note_id)
    return ActionResult()


def _confirm_delete(repo: NoteRepository) -> ActionResult:
    note_id = state.get_pending_delete()
    state.set_pending_delete(None)
    if not note_id or not repo.delete(note_id):
        return ActionResult()
    if state.get_form().note_id == note_id:
        state.reset_form()
    _after_mutation(repo)
    return ActionResult(changed=True, level="success", message="Note deleted.")


def _cancel_delete(repo: NoteRepository) -> ActionResult:
    state.set_pending_delete(None)
    return ActionResult()


def _search(repo: NoteRepository, text: Any = None) -> ActionResult:
    # Without a payload the widget has already written the new text.
    if text is not None:
        state.set_search_text(str(text))
    state.set_pending_delete(None)
    return ActionResult()


def _filter(repo: NoteRepository, tag: Any = None) -> ActionResult:
    if tag is not None:
        state.set_filter_tag(str(tag))
    state.set_pending_delete(None)
    state.ensure_filter_tag_valid(distinct_tags(repo.notes))
    return ActionResult()


ACTIONS: Dict[str, Handler] = {
    "submit": _submit,
    "edit": _edit,
    "clear": _clear,
    "request_delete": _request_delete,
    "confirm_delete": _confirm_delete,
    "cancel_delete": _cancel_delete,
    "search": _search,
    "filter": _filter,
}


def dispatch(action: str, repo: NoteRepository, **payload: Any) -> ActionResult:
    """Run one user action to completion and record its feedback for the next render."""
    handler = ACTIONS.get(action)
    if handler is None:
        raise KeyError(f"Unknown notes action: {action}")
    result = handler(repo, **payload)
    if result.message:
        state.set_feedback(result.level or "info", result.message)
    logger.debug("Notes action %s -> changed=%s", action, result.changed)
    return result
