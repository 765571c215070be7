"""Landing page with a short tour of the app."""

from __future__ import annotations

import streamlit as st

from notes_manager.config import Settings
from notes_manager.ui.notes.state import get_repository


def _go_to(page: str) -> None:
    st.session_state["workspace_page"] = page


def render(settings: Settings) -> None:
    repo = get_repository(settings)
    st.markdown(
        "Keep quick notes, tag them and find them again with search and tag filters. "
        "Everything is stored locally."
    )
    st.metric("Notes stored", len(repo))
    st.button("Open notes →", key="home_open_notes", type="primary", on_click=_go_to, args=("notes",))
