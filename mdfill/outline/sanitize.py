"""
Key sanitization for placeholder names.

Heading and label text is turned into a kebab-case identifier that can be
used inside a template marker such as ``{section-one-field-a}``.
"""

import re

_SPACE_RUN = re.compile(r" +")


def _is_key_char(char: str) -> bool:
    return char.isalpha() or char.isnumeric() or char in " _-"


def strip_key_chars(text: str) -> str:
    """Case-folds the text and deletes every character not allowed in a key."""
    return "".join(char for char in text.casefold() if _is_key_char(char))


def to_kebab_case(text: str) -> str:
    """Trims the text, then turns space runs and underscores into hyphens."""
    return _SPACE_RUN.sub("-", text.strip()).replace("_", "-")


def sanitize_key(text: str) -> str:
    """
    Converts arbitrary heading or label text into a placeholder key.

    Steps, in order: case-fold, keep only letters, digits, spaces,
    underscores and hyphens, trim, then replace each run of spaces with a
    single hyphen and each underscore with a hyphen.

    >>> sanitize_key("Field, A!")
    'field-a'
    >>> sanitize_key("Release_Notes  2024")
    'release-notes-2024'
    """
    return to_kebab_case(strip_key_chars(text))


def prefixed_key(prefix: str, key: str) -> str:
    """Joins a section prefix and a key, leaving the key alone when no prefix is active."""
    if prefix:
        return f"{prefix}-{key}"
    return key
