from __future__ import annotations

from notes_manager.schema import Note
from notes_manager.security import escape_attr, escape_text
from notes_manager.ui.notes.render import (
    ALL_TAGS_LABEL,
    EMPTY_NOTES_MESSAGE,
    build_notes_view,
    render_note_item_html,
    render_notes_list_html,
    tag_filter_options,
    tag_option_label,
)
from notes_manager.ui.style import footer_html


def _note(**kw: object) -> Note:
    base = {"id": "n1", "title": "T", "content": "C", "tag": "", "created": 0, "updated": 0}
    base.update(kw)
    return Note.model_validate(base)


def test_escape_helpers_cover_markup_characters() -> None:
    assert escape_text("a & b <i>x</i>") == "a &amp; b &lt;i&gt;x&lt;/i&gt;"
    assert escape_text('say "hi"') == 'say "hi"'
    assert escape_attr('x" onclick="y') == "x&quot; onclick=&quot;y"
    assert escape_text(None) == ""


def test_script_in_title_and_content_is_escaped() -> None:
    note = _note(title="<script>alert(1)</script>", content="a<b && c>d", tag="<b>tag</b>")
    out = render_note_item_html(note)

    assert "<script>" not in out
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in out
    assert "a&lt;b &amp;&amp; c&gt;d" in out
    assert "<em>&lt;b&gt;tag&lt;/b&gt;</em>" in out


def test_note_item_includes_id_meta_and_body() -> None:
    out = render_note_item_html(_note(id="abc", title="Groceries", content="Milk", tag="home"))
    assert 'data-id="abc"' in out
    assert "<strong>Groceries</strong>" in out
    assert '<div class="note-body">Milk</div>' in out
    assert "<em>home</em> • " in out


def test_untagged_note_meta_has_no_tag_marker() -> None:
    out = render_note_item_html(_note(tag=""))
    assert "<em>" not in out


def test_empty_list_renders_explicit_no_notes_row() -> None:
    out = render_notes_list_html([])
    assert EMPTY_NOTES_MESSAGE in out
    assert "note-empty" in out

    populated = render_notes_list_html([_note()])
    assert EMPTY_NOTES_MESSAGE not in populated


def test_build_notes_view_filters_rows_but_indexes_all_tags() -> None:
    notes = [
        _note(id="1", title="Groceries", content="Milk", tag="home", updated=2),
        _note(id="2", title="Review", content="Sprint", tag="work", updated=1),
    ]
    view = build_notes_view(notes, text="milk", tag="")
    assert [n.id for n in view.notes] == ["1"]
    assert view.tags == ["home", "work"]
    assert not view.is_empty

    assert build_notes_view(notes, text="", tag="nope").is_empty


def test_tag_filter_options_start_with_all_tags() -> None:
    options = tag_filter_options(["home", "work"])
    assert options == ["", "home", "work"]
    assert tag_option_label("") == ALL_TAGS_LABEL
    assert tag_option_label("home") == "home"


def test_footer_shows_year_and_escapes_title() -> None:
    out = footer_html("<Notes>", year=2031)
    assert "2031" in out
    assert "&lt;Notes&gt;" in out


def test_blank_lines_in_content_stay_inside_the_row_block() -> None:
    note = _note(title="Plan", content="para one\n\n**bold** ![x](http://evil/t.png)\r\nlast")
    out = render_notes_list_html([note])

    assert "\n" not in out
    assert "\r" not in out
    assert '<div class="note-body">para one<br><br>**bold** ![x](http://evil/t.png)<br>last</div>' in out
    assert out.endswith("</li></ul>")
