from __future__ import annotations

import hashlib
import html
import secrets
from typing import Tuple

import streamlit as st

_PBKDF2_ITERATIONS = 120_000


def escape_text(value: object) -> str:
    """Escape `&`, `<` and `>` so user text is never read as markup."""
    return html.escape(str(value if value is not None else ""), quote=False)


def escape_attr(value: object) -> str:
    """Escape text for use inside a double-quoted HTML attribute."""
    return html.escape(str(value if value is not None else ""), quote=True)


def hash_password(password: str, *, salt: str | None = None) -> Tuple[str, str]:
    """Return `(hex_digest, hex_salt)` for a password using PBKDF2-SHA256."""
    salt_hex = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), bytes.fromhex(salt_hex), _PBKDF2_ITERATIONS
    )
    return digest.hex(), salt_hex


def consent_banner() -> None:
    st.caption(
        "🔒 Privacy: the app runs locally. "
        "Notes and demo registrations are stored only on this machine."
    )
