from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any

from notes_manager import config as cfg
from notes_manager.utils import configure_logging, format_epoch_ms, new_note_id, now_iso, now_ms


def test_now_iso_is_valid_utc_timestamp() -> None:
    parsed = datetime.fromisoformat(now_iso())
    assert parsed.tzinfo is not None


def test_new_note_id_prefixes_creation_millis_with_random_suffix() -> None:
    stamp = now_ms()
    note_id = new_note_id(stamp)
    assert note_id.startswith(str(stamp))
    assert re.fullmatch(r"[0-9a-z]{5}", note_id[len(str(stamp)) :])


def test_format_epoch_ms_renders_local_datetime() -> None:
    stamp = int(datetime(2024, 3, 5, 14, 30).timestamp() * 1000)
    assert format_epoch_ms(stamp) == "2024-03-05 14:30"
    assert format_epoch_ms(10**20) == ""


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging("debug")
    handlers_before = len(logger.handlers)
    configure_logging("WARNING")
    assert len(logger.handlers) == handlers_before
    assert logger.level == logging.WARNING

    configure_logging("not-a-level")
    assert logger.level == logging.INFO


def test_config_ensure_env_from_example_and_load_save(monkeypatch: Any, tmp_path: Path) -> None:
    env_path = tmp_path / ".env"
    env_example = tmp_path / ".env.example"
    env_example.write_text(
        "APP_TITLE=My Notes\nTHEME=dark  # light|dark\nNOTES_FILTER_TAG=work\n", encoding="utf-8"
    )

    monkeypatch.setattr(cfg, "ENV_PATH", env_path)
    monkeypatch.setattr(cfg, "ENV_EXAMPLE_PATH", env_example)

    cfg.ensure_env()
    assert env_path.exists()

    settings = cfg.load_settings()
    assert settings.APP_TITLE == "My Notes"
    assert settings.THEME == "dark"
    assert settings.NOTES_FILTER_TAG == "work"
    assert settings.NOTES_KEY == "notesapp_notes_v1"

    cfg.save_settings(settings.model_copy(update={"NOTES_FILTER_TAG": "home"}))
    saved = env_path.read_text(encoding="utf-8")
    assert "NOTES_FILTER_TAG=home" in saved
    assert cfg.load_settings().NOTES_FILTER_TAG == "home"


def test_config_unknown_theme_falls_back_to_auto(monkeypatch: Any, tmp_path: Path) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text("THEME=sepia\n", encoding="utf-8")
    monkeypatch.setattr(cfg, "ENV_PATH", env_path)

    assert cfg.load_settings().THEME == "auto"


def test_config_resolves_relative_store_path_against_env_location(
    monkeypatch: Any, tmp_path: Path
) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text("STORE_PATH=data/store.json\n", encoding="utf-8")

    monkeypatch.setattr(cfg, "ENV_PATH", env_path)
    monkeypatch.setattr(cfg, "ENV_EXAMPLE_PATH", tmp_path / ".env.example")

    settings = cfg.load_settings()
    assert settings.STORE_PATH == str((tmp_path / "data/store.json").resolve())

    cfg.save_settings(settings)
    saved = env_path.read_text(encoding="utf-8")
    assert "STORE_PATH=data/store.json" in saved
