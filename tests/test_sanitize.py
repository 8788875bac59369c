import pytest

from mdfill.outline.sanitize import prefixed_key, sanitize_key, strip_key_chars, to_kebab_case


def test_sanitize_basic():
    assert sanitize_key("Section One") == "section-one"


def test_sanitize_removes_punctuation():
    assert sanitize_key("Field, A!") == "field-a"


def test_sanitize_trims_before_hyphenating():
    assert sanitize_key("   Padded Heading   ") == "padded-heading"


def test_sanitize_space_run_becomes_single_hyphen():
    assert sanitize_key("a    b") == "a-b"


def test_sanitize_underscores_become_hyphens():
    assert sanitize_key("snake_case_key") == "snake-case-key"


def test_sanitize_keeps_existing_hyphens_and_digits():
    assert sanitize_key("Step-2 of 10") == "step-2-of-10"


def test_sanitize_unicode_letters_kept_and_case_folded():
    assert sanitize_key("Größe Ändern") == "grösse-ändern"


def test_sanitize_deletes_tabs_and_symbols():
    assert sanitize_key("a\tb & c") == "ab-c"


def test_sanitize_empty_and_symbol_only():
    assert sanitize_key("") == ""
    assert sanitize_key("!!! ???") == ""


@pytest.mark.parametrize("text", [
    "Section One",
    "Field, A!",
    "a - b",
    "__init__",
    "  Mixed_Case  With   Spaces ",
    "Straße №5",
    "",
])
def test_sanitize_is_idempotent(text):
    once = sanitize_key(text)
    assert sanitize_key(once) == once


def test_strip_key_chars_does_not_hyphenate():
    assert strip_key_chars(" Field, A!") == " field a"


def test_to_kebab_case():
    assert to_kebab_case("  a b_c ") == "a-b-c"


def test_prefixed_key():
    assert prefixed_key("intro", "label-name") == "intro-label-name"
    assert prefixed_key("", "label-name") == "label-name"
