"""Command-line entrypoint that boots the Streamlit notes app on localhost."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from streamlit.web import cli as stcli


def _int_env(name: str, default: int) -> int:
    raw = str(os.getenv(name, "") or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = str(os.getenv(name, "") or "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def _resolve_app_script() -> Path:
    base = Path(getattr(sys, "_MEIPASS", Path(__file__).resolve().parent))
    script = base / "app.py"
    if script.exists():
        return script
    raise FileNotFoundError(f"Could not find Streamlit entrypoint: {script}")


def _configure_streamlit_runtime_defaults() -> None:
    """Keep the server bound to localhost with no telemetry or file watching."""
    os.environ.setdefault("STREAMLIT_SERVER_ADDRESS", "127.0.0.1")
    os.environ.setdefault("STREAMLIT_BROWSER_GATHER_USAGE_STATS", "false")
    os.environ.setdefault("STREAMLIT_SERVER_FILE_WATCHER_TYPE", "none")
    os.environ.setdefault("STREAMLIT_SERVER_RUN_ON_SAVE", "false")


def _build_streamlit_argv(script: Path, *, port: int | None, headless: bool) -> list[str]:
    argv = [
        "streamlit",
        "run",
        str(script),
        "--global.developmentMode=false",
        "--server.fileWatcherType=none",
        "--server.runOnSave=false",
        "--server.address=127.0.0.1",
    ]
    if port is not None:
        argv.append(f"--server.port={int(port)}")
    if headless:
        argv.append("--server.headless=true")
    return argv


def main() -> int:
    _configure_streamlit_runtime_defaults()
    port = _int_env("NOTES_MANAGER_PORT", 8501)
    headless = _bool_env("NOTES_MANAGER_HEADLESS", False)
    if headless:
        os.environ["BROWSER"] = "none"
    sys.argv = _build_streamlit_argv(_resolve_app_script(), port=port, headless=headless)
    return int(stcli.main() or 0)


if __name__ == "__main__":
    raise SystemExit(main())
