"""Typed schema models for persisted notes and demo user records."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


# -----------------------------
# NOTES
# -----------------------------
class Note(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    content: str
    tag: str = ""
    created: int = 0
    updated: int = 0

    @model_validator(mode="before")
    @classmethod
    def _fill_missing_timestamps(cls, data: Any) -> Any:
        # Older payloads may omit `updated`; treat it as the creation time.
        if isinstance(data, dict):
            if data.get("tag") is None:
                data = {**data, "tag": ""}
            if data.get("updated") is None and data.get("created") is not None:
                data = {**data, "updated": data["created"]}
        return data

    @model_validator(mode="after")
    def _updated_not_before_created(self) -> "Note":
        if self.updated < self.created:
            self.updated = self.created
        return self


# -----------------------------
# REGISTRATION (demo)
# -----------------------------
class UserRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str = ""
    email: str
    password_hash: str = ""
    password_salt: str = ""
    registered_at: str = ""


class ContactMessage(BaseModel):
    name: str = ""
    email: str = ""
    message: str = ""
