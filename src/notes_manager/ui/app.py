"""Main Streamlit application shell for navigation, theme and global UI state."""

from __future__ import annotations

from typing import Callable, Dict

import streamlit as st

from notes_manager.config import Settings, ensure_env, load_settings, save_settings
from notes_manager.security import consent_banner
from notes_manager.ui.pages import contact_page, home_page, notes_page, register_page
from notes_manager.ui.style import inject_app_css, render_footer, render_hero
from notes_manager.utils import configure_logging

PAGE_KEY = "workspace_page"
DEFAULT_PAGE = "notes"


def _page_labels() -> Dict[str, str]:
    """Map internal page ids to visible labels."""
    return {
        "home": "🏠 Home",
        "notes": "🗒️ Notes",
        "register": "👤 Register",
        "contact": "✉️ Contact",
    }


def _page_renderers() -> Dict[str, Callable[[Settings], None]]:
    return {
        "home": home_page.render,
        "notes": notes_page.render,
        "register": register_page.render,
        "contact": contact_page.render,
    }


def _ensure_nav_state() -> str:
    """Keep the selected page valid across reruns."""
    pages = list(_page_labels().keys())
    page = str(st.session_state.get(PAGE_KEY) or DEFAULT_PAGE).strip().lower()
    if page not in pages:
        page = DEFAULT_PAGE
    st.session_state[PAGE_KEY] = page
    return page


def _theme_pref_to_dark_mode(theme_pref: str, *, fallback: bool = False) -> bool:
    pref = str(theme_pref or "").strip().lower()
    if pref == "dark":
        return True
    if pref == "light":
        return False
    return fallback


def _persist_theme_preference_in_env(is_dark: bool) -> None:
    desired_theme = "dark" if bool(is_dark) else "light"
    settings = load_settings()
    current_theme = str(getattr(settings, "THEME", "") or "").strip().lower()
    if current_theme == desired_theme:
        return
    save_settings(settings.model_copy(update={"THEME": desired_theme}))


def _toggle_dark_mode() -> None:
    st.session_state["workspace_dark_mode"] = not bool(
        st.session_state.get("workspace_dark_mode", False)
    )
    _persist_theme_preference_in_env(bool(st.session_state.get("workspace_dark_mode", False)))


def _render_sidebar_nav() -> None:
    """Sidebar navigation; collapses on narrow screens like any Streamlit sidebar."""
    labels = _page_labels()
    with st.sidebar:
        st.radio(
            "Navigation",
            options=list(labels.keys()),
            key=PAGE_KEY,
            format_func=lambda page: labels.get(str(page), str(page)),
        )
        is_dark = bool(st.session_state.get("workspace_dark_mode", False))
        st.button(
            "☀️ Light theme" if is_dark else "🌙 Dark theme",
            key="workspace_btn_theme",
            width="stretch",
            on_click=_toggle_dark_mode,
        )
        consent_banner()


def main() -> None:
    """Boot application, render the shell and dispatch the selected page."""
    ensure_env()
    settings = load_settings()
    configure_logging(settings.LOG_LEVEL)

    if "workspace_dark_mode" not in st.session_state:
        st.session_state["workspace_dark_mode"] = _theme_pref_to_dark_mode(
            str(getattr(settings, "THEME", "auto") or "auto")
        )
    app_title = str(getattr(settings, "APP_TITLE", "") or "").strip() or "Notes App"

    st.set_page_config(page_title=app_title, page_icon="🗒️", layout="wide")
    inject_app_css(dark_mode=bool(st.session_state.get("workspace_dark_mode", False)))
    render_hero(app_title)

    page = _ensure_nav_state()
    _render_sidebar_nav()
    _page_renderers()[page](settings)
    render_footer(app_title)
