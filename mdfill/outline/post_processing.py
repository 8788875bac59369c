"""
Post-processing for extracted outline values.

This module prepares values for the Word document:
- Bullet normalization: list lines starting with "-" or "+" get a bullet glyph
- Emphasis stripping: "**" and "*" delimiters are removed from the text
- Emphasis spans: best-effort bold/italic metadata for the placeholder filler

The emphasis heuristic splits on delimiter occurrences and treats every odd
segment as styled. Unbalanced or nested markers give inconsistent results;
that limitation is kept as-is rather than guessing at corrected semantics.
"""

import logging
from typing import Dict, List

from .constants import (
    BOLD_DELIMITER,
    BULLET_MARKERS,
    DEFAULT_BULLET,
    ITALIC_DELIMITER,
    TextSpan,
)

logger = logging.getLogger(__name__)


def process_value(value: str, bullet: str = DEFAULT_BULLET) -> str:
    """
    Replaces the leading "-" or "+" of each line with a bullet glyph.

    Only the first character is replaced; the rest of the line, including
    the space after the marker, is left untouched. Lines are handled
    independently, there is no nesting.

    Args:
        value: Newline-joined raw value of an entry
        bullet: Glyph substituted for the list marker

    Returns:
        The value with list markers normalized, joined with newlines
    """
    lines = []
    for line in value.split("\n"):
        if line.startswith(BULLET_MARKERS):
            line = bullet + line[1:]
        lines.append(line)
    return "\n".join(lines)


def strip_emphasis(value: str) -> str:
    """Removes bold and italic delimiters from a value."""
    return value.replace(BOLD_DELIMITER, "").replace(ITALIC_DELIMITER, "")


def _split_styled(value: str, delimiter: str) -> List[tuple]:
    # Odd-numbered segments sit between a pair of delimiters
    return [(part, index % 2 == 1) for index, part in enumerate(value.split(delimiter))]


def split_emphasis_spans(value: str) -> List[TextSpan]:
    """
    Splits a value into delimiter-free spans with bold/italic flags.

    Text between "**" pairs is bold. Inside the remaining text, text between
    lone "*" pairs is italic. Italic markers inside a bold span are simply
    dropped. Empty spans are omitted.

    >>> split_emphasis_spans("a **b** *c*")
    [TextSpan(text='a ', bold=False, italic=False), TextSpan(text='b', bold=True, italic=False), TextSpan(text=' ', bold=False, italic=False), TextSpan(text='c', bold=False, italic=True)]
    """
    spans: List[TextSpan] = []
    for segment, bold in _split_styled(value, BOLD_DELIMITER):
        if bold:
            text = segment.replace(ITALIC_DELIMITER, "")
            if text:
                spans.append(TextSpan(text, bold=True))
            continue
        for part, italic in _split_styled(segment, ITALIC_DELIMITER):
            if part:
                spans.append(TextSpan(part, italic=italic))
    return spans


def build_replacements(data: Dict[str, str], emphasis_styles: bool = True) -> Dict[str, List[TextSpan]]:
    """
    Converts an extracted mapping into the span lists the filler writes.

    With emphasis_styles disabled every value becomes a single unstyled span
    with the delimiters stripped.
    """
    replacements: Dict[str, List[TextSpan]] = {}
    for key, value in data.items():
        if emphasis_styles:
            spans = split_emphasis_spans(value)
        else:
            spans = [TextSpan(strip_emphasis(value))]
        replacements[key] = spans
        logger.debug("Replacement for %s: %s", key, spans)
    return replacements
