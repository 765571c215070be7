"""Notes page: create/edit form, search, tag filter and the rendered list."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import streamlit as st

from notes_manager.config import Settings
from notes_manager.schema import Note
from notes_manager.services.query import distinct_tags, notes_to_csv_bytes
from notes_manager.ui.notes import state
from notes_manager.ui.notes.actions import dispatch
from notes_manager.ui.notes.render import (
    build_notes_view,
    render_notes_list_html,
    tag_filter_options,
    tag_option_label,
)


def _on_action(settings: Settings, action: str, **payload: Any) -> None:
    dispatch(action, state.get_repository(settings), **payload)


def _render_feedback() -> None:
    feedback = state.pop_feedback()
    if feedback is None:
        return
    level, message = feedback
    if level == "error":
        st.error(message)
    elif level == "success":
        st.success(message)
    else:
        st.info(message)


def _render_form(settings: Settings) -> None:
    form = state.get_form()
    st.markdown("#### ✏️ Edit note" if form.is_edit else "#### ➕ New note")
    st.text_input("Title", key=state.FORM_TITLE_KEY)
    st.text_area("Content", key=state.FORM_CONTENT_KEY, height=160)
    st.text_input("Tag (optional)", key=state.FORM_TAG_KEY)

    c_save, c_clear = st.columns(2)
    c_save.button(
        "💾 Save note",
        key="notes_save_btn",
        type="primary",
        width="stretch",
        on_click=_on_action,
        args=(settings, "submit"),
    )
    c_clear.button(
        "Clear",
        key="notes_clear_btn",
        width="stretch",
        on_click=_on_action,
        args=(settings, "clear"),
    )


def _render_row(settings: Settings, note: Note) -> None:
    st.markdown(render_notes_list_html([note]), unsafe_allow_html=True)
    c_edit, c_delete, _ = st.columns([1, 1, 4])
    c_edit.button(
        "Edit",
        key=f"notes_edit_{note.id}",
        on_click=_on_action,
        args=(settings, "edit"),
        kwargs={"note_id": note.id},
    )
    c_delete.button(
        "Delete",
        key=f"notes_delete_{note.id}",
        on_click=_on_action,
        args=(settings, "request_delete"),
        kwargs={"note_id": note.id},
    )

    if state.get_pending_delete() == note.id:
        st.warning("Delete this note?")
        c_yes, c_no, _ = st.columns([1, 1, 4])
        c_yes.button(
            "Yes, delete",
            key=f"notes_confirm_delete_{note.id}",
            type="primary",
            on_click=_on_action,
            args=(settings, "confirm_delete"),
        )
        c_no.button(
            "Cancel",
            key=f"notes_cancel_delete_{note.id}",
            on_click=_on_action,
            args=(settings, "cancel_delete"),
        )


def render(settings: Settings) -> None:
    repo = state.get_repository(settings)
    state.bootstrap_filter_tag_from_env(settings)
    all_notes = repo.notes

    _render_feedback()
    left, right = st.columns([1.0, 1.6], gap="large")

    with left:
        _render_form(settings)

    with right:
        st.markdown("#### 🗒️ Your notes")
        c_search, c_tag = st.columns([2.0, 1.0])
        with c_search:
            st.text_input(
                "Search",
                key=state.SEARCH_KEY,
                placeholder="Search title or content",
                on_change=_on_action,
                args=(settings, "search"),
            )
        tags = distinct_tags(all_notes)
        state.ensure_filter_tag_valid(tags)
        with c_tag:
            st.selectbox(
                "Tag",
                options=tag_filter_options(tags),
                key=state.FILTER_TAG_KEY,
                format_func=tag_option_label,
                on_change=_on_action,
                args=(settings, "filter"),
            )

        view = build_notes_view(
            all_notes, text=state.get_search_text(), tag=state.get_filter_tag()
        )
        if view.is_empty:
            st.markdown(render_notes_list_html([]), unsafe_allow_html=True)
        else:
            for note in view.notes:
                _render_row(settings, note)

        st.download_button(
            "⬇️ Download CSV",
            data=notes_to_csv_bytes(view.notes),
            file_name=f"notes_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv",
            mime="text/csv",
            key="notes_download_csv",
            disabled=view.is_empty,
        )

    state.persist_filter_tag_in_env(settings)
