"""Contact page; the form is validated and acknowledged but nothing is sent."""

from __future__ import annotations

import streamlit as st

from notes_manager.config import Settings
from notes_manager.services.accounts import FormFeedback
from notes_manager.services.contact import submit_contact

NAME_KEY = "contact_name"
EMAIL_KEY = "contact_email"
MESSAGE_KEY = "contact_message"
FEEDBACK_KEY = "contact_feedback"


def send_message() -> FormFeedback:
    """Form callback; the fields are cleared only when the message is accepted."""
    ss = st.session_state
    feedback = submit_contact(
        name=str(ss.get(NAME_KEY) or ""),
        email=str(ss.get(EMAIL_KEY) or ""),
        message=str(ss.get(MESSAGE_KEY) or ""),
    )
    ss[FEEDBACK_KEY] = feedback
    if feedback.ok:
        for key in (NAME_KEY, EMAIL_KEY, MESSAGE_KEY):
            ss[key] = ""
    return feedback


def render(settings: Settings) -> None:
    del settings  # page has no configurable behavior
    st.markdown("#### ✉️ Contact")

    with st.form("contact_form", clear_on_submit=False):
        st.text_input("Name", key=NAME_KEY)
        st.text_input("Email", key=EMAIL_KEY)
        st.text_area("Message", height=140, key=MESSAGE_KEY)
        st.form_submit_button("Send", type="primary", on_click=send_message)

    feedback = st.session_state.pop(FEEDBACK_KEY, None)
    if feedback is None:
        return
    if feedback.ok:
        st.success(feedback.message)
    else:
        st.error(feedback.message)
