from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from notes_manager.repositories.local_store import LocalStore
from notes_manager.repositories.notes_repo import DEFAULT_NOTES_KEY, NotesFileRepo
from notes_manager.schema import Note


def _note(note_id: str, *, updated: int = 1_000, tag: str = "") -> Note:
    return Note(
        id=note_id,
        title=f"Title {note_id}",
        content=f"Content {note_id}",
        tag=tag,
        created=1_000,
        updated=updated,
    )


def test_note_ignores_extra_fields_and_defaults_missing_ones() -> None:
    note = Note.model_validate(
        {"id": "1", "title": "T", "content": "C", "created": 5, "color": "red"}
    )
    assert note.tag == ""
    assert note.updated == 5
    assert not hasattr(note, "color")


def test_note_repairs_updated_before_created() -> None:
    note = Note.model_validate(
        {"id": "1", "title": "T", "content": "C", "tag": None, "created": 50, "updated": 10}
    )
    assert note.updated == 50
    assert note.tag == ""


def test_local_store_roundtrip_and_atomic_write(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "store.json"
    store = LocalStore(path)

    assert store.get_item("missing") is None
    store.set_item("a", "1")
    store.set_item("b", "two")

    reloaded = LocalStore(path)
    assert reloaded.get_item("a") == "1"
    assert reloaded.get_item("b") == "two"
    assert json.loads(path.read_text(encoding="utf-8")) == {"a": "1", "b": "two"}
    assert not path.with_suffix(".json.tmp").exists()


def test_local_store_treats_corrupt_file_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    store = LocalStore(path)

    assert store.get_item("x") is None
    store.set_item("x", "y")
    assert json.loads(path.read_text(encoding="utf-8")) == {"x": "y"}


def test_notes_repo_load_missing_key_returns_empty(tmp_path: Path) -> None:
    repo = NotesFileRepo(LocalStore(tmp_path / "store.json"))
    assert repo.key == DEFAULT_NOTES_KEY
    assert repo.load() == []


def test_notes_repo_roundtrip_preserves_order_and_fields(tmp_path: Path) -> None:
    store = LocalStore(tmp_path / "store.json")
    notes = [_note("b", updated=3_000, tag="home"), _note("a", updated=2_000)]

    NotesFileRepo(store).save(notes)
    loaded = NotesFileRepo(LocalStore(tmp_path / "store.json")).load()

    assert loaded == notes
    assert [n.id for n in loaded] == ["b", "a"]


def test_notes_repo_persists_expected_wire_format(tmp_path: Path) -> None:
    store = LocalStore(tmp_path / "store.json")
    NotesFileRepo(store, key="custom").save([_note("1", tag="work")])

    payload = json.loads(store.get_item("custom") or "")
    assert payload == [
        {
            "id": "1",
            "title": "Title 1",
            "content": "Content 1",
            "tag": "work",
            "created": 1000,
            "updated": 1000,
        }
    ]


def test_notes_repo_save_is_full_replace(tmp_path: Path) -> None:
    store = LocalStore(tmp_path / "store.json")
    repo = NotesFileRepo(store)
    repo.save([_note("1"), _note("2")])
    repo.save([_note("3")])

    assert [n.id for n in repo.load()] == ["3"]


@pytest.mark.parametrize("raw", ["{broken", '{"id": "1"}', "42", "null"])
def test_notes_repo_fails_open_on_unparseable_data(
    tmp_path: Path, caplog: pytest.LogCaptureFixture, raw: str
) -> None:
    store = LocalStore(tmp_path / "store.json")
    store.set_item(DEFAULT_NOTES_KEY, raw)

    with caplog.at_level(logging.WARNING, logger="notes_manager"):
        assert NotesFileRepo(store).load() == []
    assert "Failed reading notes" in caplog.text


def test_notes_repo_skips_malformed_and_duplicate_records(tmp_path: Path) -> None:
    store = LocalStore(tmp_path / "store.json")
    store.set_item(
        DEFAULT_NOTES_KEY,
        json.dumps(
            [
                {"id": "1", "title": "ok", "content": "ok", "created": 1, "updated": 2},
                {"title": "no id"},
                "not-an-object",
                {"id": "1", "title": "dup", "content": "dup", "created": 1, "updated": 1},
                {"id": "2", "title": "ok2", "content": "ok2", "extra": True},
            ]
        ),
    )

    loaded = NotesFileRepo(store).load()
    assert [n.id for n in loaded] == ["1", "2"]
    assert loaded[0].title == "ok"
