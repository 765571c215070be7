"""Demo registration flow persisted in the local store (no login, no sessions)."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import List

from pydantic import ValidationError

from notes_manager.repositories.local_store import LocalStore
from notes_manager.schema import UserRecord
from notes_manager.security import hash_password
from notes_manager.utils import now_iso, now_ms

logger = logging.getLogger(__name__)

DEFAULT_USERS_KEY = "notesapp_users_v1"
MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True)
class FormFeedback:
    ok: bool
    message: str


class UsersRepo:
    def __init__(self, store: LocalStore, key: str = DEFAULT_USERS_KEY) -> None:
        self._store = store
        self._key = key or DEFAULT_USERS_KEY

    def load(self) -> List[UserRecord]:
        raw = self._store.get_item(self._key)
        if not raw:
            return []
        try:
            payload = json.loads(raw)
        except ValueError as exc:
            logger.warning("Failed reading users under %r: %s", self._key, exc)
            return []
        if not isinstance(payload, list):
            return []
        users: List[UserRecord] = []
        for row in payload:
            try:
                users.append(UserRecord.model_validate(row))
            except ValidationError:
                continue
        return users

    def save(self, users: List[UserRecord]) -> None:
        payload = [u.model_dump() for u in users]
        self._store.set_item(self._key, json.dumps(payload, ensure_ascii=False))


def register_user(
    repo: UsersRepo, *, name: str, email: str, password: str, password_confirm: str
) -> FormFeedback:
    """Validate and store a demo account. Passwords are kept only as salted hashes."""
    name_txt = str(name or "").strip()
    email_txt = str(email or "").strip()
    password = str(password or "")

    if len(password) < MIN_PASSWORD_LENGTH:
        return FormFeedback(False, f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
    if password != str(password_confirm or ""):
        return FormFeedback(False, "Passwords do not match.")

    users = repo.load()
    if any(u.email == email_txt for u in users):
        return FormFeedback(False, "An account with this email already exists (demo).")

    digest, salt = hash_password(password)
    users.append(
        UserRecord(
            id=now_ms(),
            name=name_txt,
            email=email_txt,
            password_hash=digest,
            password_salt=salt,
            registered_at=now_iso(),
        )
    )
    repo.save(users)
    logger.info("Registered demo user #%d", len(users))
    return FormFeedback(True, "Registration successful (demo). You can now go to Notes.")
