"""Streamlit script entrypoint (`streamlit run app.py`)."""

from __future__ import annotations

from notes_manager.ui.app import main

main()
