"""Demo registration page (accounts are stored locally and never used to log in)."""

from __future__ import annotations

from pathlib import Path

import streamlit as st

from notes_manager.config import Settings
from notes_manager.repositories.local_store import LocalStore
from notes_manager.services.accounts import FormFeedback, UsersRepo, register_user

NAME_KEY = "register_name"
EMAIL_KEY = "register_email"
PASSWORD_KEY = "register_password"
PASSWORD_CONFIRM_KEY = "register_password_confirm"
FEEDBACK_KEY = "register_feedback"
_FIELD_KEYS = (NAME_KEY, EMAIL_KEY, PASSWORD_KEY, PASSWORD_CONFIRM_KEY)


def submit_registration(settings: Settings) -> FormFeedback:
    """Form callback: register, keep the feedback for the rerun and clear the fields on success."""
    ss = st.session_state
    repo = UsersRepo(LocalStore(Path(settings.STORE_PATH)), key=settings.USERS_KEY)
    feedback = register_user(
        repo,
        name=str(ss.get(NAME_KEY) or ""),
        email=str(ss.get(EMAIL_KEY) or ""),
        password=str(ss.get(PASSWORD_KEY) or ""),
        password_confirm=str(ss.get(PASSWORD_CONFIRM_KEY) or ""),
    )
    ss[FEEDBACK_KEY] = feedback
    if feedback.ok:
        for key in _FIELD_KEYS:
            ss[key] = ""
    return feedback


def render(settings: Settings) -> None:
    st.markdown("#### 👤 Register")
    st.caption("Demo only: accounts stay on this machine and there is no login.")

    with st.form("register_form", clear_on_submit=False):
        st.text_input("Name", key=NAME_KEY)
        st.text_input("Email", key=EMAIL_KEY)
        st.text_input("Password", type="password", key=PASSWORD_KEY)
        st.text_input("Confirm password", type="password", key=PASSWORD_CONFIRM_KEY)
        st.form_submit_button(
            "Create account", type="primary", on_click=submit_registration, args=(settings,)
        )

    feedback = st.session_state.pop(FEEDBACK_KEY, None)
    if feedback is None:
        return
    if feedback.ok:
        st.success(feedback.message)
    else:
        st.error(feedback.message)
