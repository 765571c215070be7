from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict

import pytest

from notes_manager.repositories.local_store import LocalStore
from notes_manager.repositories.notes_repo import NotesFileRepo
from notes_manager.services.notes import NoteRepository


class FakeClock:
    """Epoch-millis clock that advances by `step` on every call."""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1_000) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> int:
        current = self.now
        self.now += self.step
        return current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(tmp_path: Path) -> LocalStore:
    return LocalStore(tmp_path / "data" / "local_store.json")


@pytest.fixture
def repository(store: LocalStore, clock: FakeClock) -> NoteRepository:
    return NoteRepository(NotesFileRepo(store), clock=clock)


@pytest.fixture
def fake_session(monkeypatch: Any) -> Dict[str, Any]:
    from notes_manager.ui.notes import state as notes_state

    session: Dict[str, Any] = {}
    monkeypatch.setattr(notes_state, "st", SimpleNamespace(session_state=session))
    return session
