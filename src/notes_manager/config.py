"""Configuration loading, validation and persistence helpers."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, List

from dotenv import dotenv_values
from pydantic import BaseModel


def _default_user_config_home() -> Path:
    """
    Return an OS-appropriate, user-writable config directory.

    Used for frozen builds, where the install directory is often read-only.
    """
    if sys.platform == "darwin":
        base = Path("~/Library/Application Support").expanduser()
    elif os.name == "nt":
        base = Path(os.environ.get("APPDATA") or (Path.home() / "AppData" / "Roaming"))
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME") or (Path.home() / ".config"))
    return (base / "notes-manager").expanduser()


def _runtime_home() -> Path:
    override = str(os.getenv("NOTES_MANAGER_HOME", "") or "").strip()
    if override:
        return Path(override).expanduser().resolve()
    if getattr(sys, "frozen", False):
        return _default_user_config_home().resolve()
    return Path(__file__).resolve().parents[2]


DEFAULT_CONFIG_HOME = _runtime_home()
ENV_PATH = DEFAULT_CONFIG_HOME / ".env"
ENV_EXAMPLE_PATH = DEFAULT_CONFIG_HOME / ".env.example"

_PATH_SETTING_KEYS = {"STORE_PATH"}
_ALLOWED_THEMES = {"auto", "light", "dark"}


def _candidate_env_example_paths() -> List[Path]:
    out: List[Path] = [ENV_EXAMPLE_PATH]
    try:
        out.append(Path.cwd() / ".env.example")
    except OSError:
        pass

    # De-dup preserving order.
    seen: set[str] = set()
    uniq: List[Path] = []
    for path in out:
        key = str(path)
        if key in seen:
            continue
        seen.add(key)
        uniq.append(path)
    return uniq


def _strip_legacy_inline_comment(value: object) -> str:
    """
    Strip inline comments like `THEME=light  # light|dark`.

    python-dotenv may keep the comment as part of an unquoted value.
    """
    txt = str(value or "").strip()
    if " #" in txt:
        txt = txt.split(" #", 1)[0].strip()
    return txt


def _coerce_str(value: Any) -> str:
    return str(value or "").strip()


def config_home() -> Path:
    return ENV_PATH.expanduser().resolve().parent


def _resolve_runtime_path(raw: str) -> str:
    txt = _coerce_str(raw)
    if not txt:
        return ""
    path = Path(txt).expanduser()
    if not path.is_absolute():
        path = config_home() / path
    return str(path.resolve())


def _to_storable_path(raw: str) -> str:
    txt = _coerce_str(raw)
    if not txt:
        return ""
    path = Path(txt).expanduser()
    if not path.is_absolute():
        return str(path)
    try:
        rel = path.resolve().relative_to(config_home())
        return str(rel)
    except ValueError:
        return str(path.resolve())


class Settings(BaseModel):
    APP_TITLE: str = "Notes App"
    THEME: str = "auto"
    STORE_PATH: str = "data/local_store.json"
    NOTES_KEY: str = "notesapp_notes_v1"
    USERS_KEY: str = "notesapp_users_v1"
    LOG_LEVEL: str = "INFO"

    # -------------------------
    # Notes page preferences
    # -------------------------
    NOTES_FILTER_TAG: str = ""


def ensure_env() -> None:
    ENV_PATH.parent.mkdir(parents=True, exist_ok=True)
    if not ENV_PATH.exists():
        example_path = next((p for p in _candidate_env_example_paths() if p.exists()), None)
        if example_path is not None:
            ENV_PATH.write_text(example_path.read_text(encoding="utf-8"), encoding="utf-8")
            return
        ENV_PATH.write_text("", encoding="utf-8")


def load_settings() -> Settings:
    vals = {k: v for k, v in dotenv_values(ENV_PATH).items() if v is not None}

    for key in ("THEME", "LOG_LEVEL"):
        if key in vals:
            vals[key] = _strip_legacy_inline_comment(vals[key])
    if "THEME" in vals and vals["THEME"].lower() not in _ALLOWED_THEMES:
        vals["THEME"] = "auto"

    settings = Settings.model_validate(vals)

    payload = settings.model_dump()
    for key in _PATH_SETTING_KEYS:
        payload[key] = _resolve_runtime_path(str(payload.get(key) or ""))
    return Settings.model_validate(payload)


def save_settings(settings: Settings) -> None:
    ENV_PATH.parent.mkdir(parents=True, exist_ok=True)
    lines = []
    data = settings.model_dump()

    for k, v in data.items():
        if isinstance(v, str):
            if k in _PATH_SETTING_KEYS:
                v = _to_storable_path(v)
        lines.append(f"{k}={v}")

    ENV_PATH.write_text("\n".join(lines) + "\n", encoding="utf-8")
