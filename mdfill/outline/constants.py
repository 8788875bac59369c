"""
Shared constants and types for the outline module.

This module contains:
- LineKind: the four kinds of line the scanner recognizes
- Markers: the prefixes that identify headings and definition entries
- BULLET_MARKERS / DEFAULT_BULLET: list-marker normalization
- TextSpan: a styled piece of delimiter-free text handed to the filler
"""

from enum import Enum
from typing import NamedTuple


class LineKind(Enum):
    """Classification of one trimmed outline line."""
    ENTRY_HEADING = "entry_heading"
    DEFINITION_ENTRY = "definition_entry"
    SECTION_HEADING = "section_heading"
    PLAIN_TEXT = "plain_text"


# Level-3 must be tested before level-2, "###" also starts with "##"
ENTRY_HEADING_MARKER = "###"
SECTION_HEADING_MARKER = "##"
DEFINITION_MARKER = ":"

# Characters that open a list item and get replaced by the bullet glyph
BULLET_MARKERS = ("-", "+")
DEFAULT_BULLET = "•"

# Emphasis delimiters, doubled marker is bold, lone marker is italic
BOLD_DELIMITER = "**"
ITALIC_DELIMITER = "*"


class TextSpan(NamedTuple):
    """A run of text with the emphasis styling it should carry."""
    text: str
    bold: bool = False
    italic: bool = False
