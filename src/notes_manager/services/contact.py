"""Contact form validation. Messages are acknowledged, never sent anywhere."""

from __future__ import annotations

from notes_manager.schema import ContactMessage
from notes_manager.services.accounts import FormFeedback


def submit_contact(*, name: str, email: str, message: str) -> FormFeedback:
    msg = ContactMessage(
        name=str(name or "").strip(),
        email=str(email or "").strip(),
        message=str(message or "").strip(),
    )
    if not msg.name or not msg.email or not msg.message:
        return FormFeedback(False, "Please fill all fields.")
    return FormFeedback(True, "Thank you! Your message has been received (demo).")
