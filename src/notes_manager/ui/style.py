"""Shared visual styling helpers for the Streamlit pages."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import streamlit as st

from notes_manager.security import escape_text


@dataclass(frozen=True)
class Palette:
    primary: str
    ink: str
    muted: str
    surface: str
    surface_alt: str
    border: str


LIGHT = Palette(
    primary="#2563EB",
    ink="#11192D",
    muted="rgba(17,25,45,0.64)",
    surface="#FFFFFF",
    surface_alt="#F4F6F9",
    border="rgba(17,25,45,0.12)",
)
DARK = Palette(
    primary="#5F9FFF",
    ink="#EAF0FF",
    muted="rgba(234,240,255,0.70)",
    surface="#13203A",
    surface_alt="#0A1228",
    border="rgba(234,240,255,0.22)",
)


def inject_app_css(*, dark_mode: bool = False) -> None:
    """Inject CSS variables and note-list components for light/dark themes."""
    palette = DARK if dark_mode else LIGHT
    css = """
        <style>
          :root {
            --notes-primary: __PRIMARY__;
            --notes-ink: __INK__;
            --notes-muted: __MUTED__;
            --notes-surface: __SURFACE__;
            --notes-surface-alt: __SURFACE_ALT__;
            --notes-border: __BORDER__;
          }
          .notes-hero {
            padding: 1.1rem 1.3rem;
            border-radius: 14px;
            background: linear-gradient(120deg, var(--notes-primary), #1E3A8A);
            color: #FFFFFF;
            margin-bottom: 1rem;
          }
          .notes-hero-title { font-size: 1.6rem; font-weight: 760; }
          .notes-hero-sub { opacity: 0.86; font-size: 0.95rem; }
          ul.notes-list { list-style: none; padding-left: 0; margin: 0; }
          .note-item {
            border: 1px solid var(--notes-border);
            background: var(--notes-surface);
            color: var(--notes-ink);
            border-radius: 10px;
            padding: 0.7rem 0.9rem;
            margin-bottom: 0.35rem;
          }
          .note-item.note-empty { color: var(--notes-muted); font-style: italic; }
          .note-meta { color: var(--notes-muted); font-size: 0.80rem; margin: 0.15rem 0 0.35rem; }
          .note-body { white-space: pre-wrap; }
          .notes-footer {
            margin-top: 2rem;
            padding-top: 0.6rem;
            border-top: 1px solid var(--notes-border);
            color: var(--notes-muted);
            font-size: 0.80rem;
          }
        </style>
    """
    css = (
        css.replace("__PRIMARY__", palette.primary)
        .replace("__INK__", palette.ink)
        .replace("__MUTED__", palette.muted)
        .replace("__SURFACE__", palette.surface)
        .replace("__SURFACE_ALT__", palette.surface_alt)
        .replace("__BORDER__", palette.border)
    )
    st.markdown(css, unsafe_allow_html=True)


def render_hero(app_title: str, subtitle: str = "Write, tag and find your notes") -> None:
    """Render a top hero section."""
    st.markdown(
        f"""
        <div class="notes-hero">
          <div class="notes-hero-title">{escape_text(app_title)}</div>
          <div class="notes-hero-sub">{escape_text(subtitle)}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def footer_html(app_title: str, *, year: int | None = None) -> str:
    current_year = year if year is not None else date.today().year
    return f'<div class="notes-footer">© {current_year} {escape_text(app_title)}</div>'


def render_footer(app_title: str) -> None:
    st.markdown(footer_html(app_title), unsafe_allow_html=True)
