from __future__ import annotations

import pytest

from notes_manager.security import escape_text, hash_password


def test_hash_password_is_salted() -> None:
    digest, salt = hash_password("secret-pass")
    digest_again, salt_again = hash_password("secret-pass")

    assert salt != salt_again
    assert digest != digest_again
    assert "secret-pass" not in digest
    assert hash_password("secret-pass", salt=salt)[0] == digest
    assert hash_password("wrong-pass", salt=salt)[0] != digest


def test_hash_password_with_fixed_salt_is_deterministic() -> None:
    salt = "00" * 16
    assert hash_password("abcdef", salt=salt) == hash_password("abcdef", salt=salt)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("<script>", "&lt;script&gt;"),
        ("Tom & Jerry", "Tom &amp; Jerry"),
        ("plain", "plain"),
        (42, "42"),
    ],
)
def test_escape_text_only_touches_markup_characters(raw: object, expected: str) -> None:
    assert escape_text(raw) == expected
