"""
Outline extraction: Markdown outline text -> flat placeholder mapping.

The scanner makes one forward pass over the document lines. It recognizes:
- "## Section" headings, whose sanitized text prefixes every following key
- "### Entry" headings, whose body is the plain text up to the next heading
- ": value" definition entries, labelled by the line right above them

Example:
    >>> extract_outline_data("## Intro\\n### Title\\nHello\\nProject\\n: Apollo\\n")
    {'intro-project': 'Apollo', 'intro-title': 'Hello\\nProject'}
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable

from .constants import (
    DEFAULT_BULLET,
    DEFINITION_MARKER,
    ENTRY_HEADING_MARKER,
    SECTION_HEADING_MARKER,
    LineKind,
)
from .errors import MalformedLineError
from .post_processing import process_value
from .sanitize import prefixed_key, sanitize_key, strip_key_chars

logger = logging.getLogger(__name__)


def classify_line(line: str) -> LineKind:
    """Returns the kind of a trimmed line. Entry headings win over section headings."""
    if line.startswith(ENTRY_HEADING_MARKER):
        return LineKind.ENTRY_HEADING
    if line.startswith(DEFINITION_MARKER):
        return LineKind.DEFINITION_ENTRY
    if line.startswith(SECTION_HEADING_MARKER):
        return LineKind.SECTION_HEADING
    return LineKind.PLAIN_TEXT


@dataclass
class ScannerState:
    """Mutable state of a single scan."""
    section_prefix: str = ""
    current_key: str = ""
    current_value: str = ""
    previous_line: str = ""
    data: Dict[str, str] = field(default_factory=dict)


class OutlineScanner:
    """
    Single-pass scanner turning outline lines into a placeholder mapping.

    Each scan() call starts from a fresh ScannerState, so one scanner can be
    reused for several documents.

    Args:
        bullet: Glyph that replaces "-" / "+" list markers in entry values
        strict: Raise MalformedLineError on definition entries without a
            value instead of skipping them
    """

    def __init__(self, bullet: str = DEFAULT_BULLET, strict: bool = False):
        self.bullet = bullet
        self.strict = strict
        self._handlers = {
            LineKind.ENTRY_HEADING: self._handle_entry_heading,
            LineKind.DEFINITION_ENTRY: self._handle_definition_entry,
            LineKind.SECTION_HEADING: self._handle_section_heading,
            LineKind.PLAIN_TEXT: self._handle_plain_text,
        }

    def scan(self, lines: Iterable[str]) -> Dict[str, str]:
        state = ScannerState()
        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.strip()
            self._handlers[classify_line(line)](state, line, line_number)
            state.previous_line = line

        self._flush(state)
        logger.debug("data length is %d", len(state.data))
        for key, value in state.data.items():
            logger.debug("%s: %s", key, value)
        return state.data

    def _heading_key(self, line: str, marker: str) -> str:
        logger.debug("Found heading: %s", line)
        heading = line[len(marker):]
        logger.debug("Sanitized key: %s", strip_key_chars(heading).strip())
        key = sanitize_key(heading)
        logger.debug("key to kebab case: %s", key)
        return key

    def _flush(self, state: ScannerState) -> None:
        if state.current_key:
            state.data[state.current_key] = process_value(state.current_value, self.bullet).strip()

    def _handle_entry_heading(self, state: ScannerState, line: str, line_number: int) -> None:
        key = self._heading_key(line, ENTRY_HEADING_MARKER)
        self._flush(state)
        state.current_key = prefixed_key(state.section_prefix, key)
        state.current_value = ""

    def _handle_definition_entry(self, state: ScannerState, line: str, line_number: int) -> None:
        _, _, value = line.partition(DEFINITION_MARKER)
        value = value.strip()
        if not value:
            if self.strict:
                raise MalformedLineError(line_number, line, "definition entry without a value")
            logger.debug("Skipping line %d: definition entry without a value", line_number)
            return
        # An empty label still writes, under the bare "<prefix>-" key
        key = sanitize_key(state.previous_line)
        state.data[prefixed_key(state.section_prefix, key)] = value

    def _handle_section_heading(self, state: ScannerState, line: str, line_number: int) -> None:
        self._flush(state)
        state.current_key = ""
        state.current_value = ""
        state.section_prefix = self._heading_key(line, SECTION_HEADING_MARKER)

    def _handle_plain_text(self, state: ScannerState, line: str, line_number: int) -> None:
        if state.current_key:
            state.current_value += line + "\n"


def extract_outline_data(markdown: str, bullet: str = DEFAULT_BULLET, strict: bool = False) -> Dict[str, str]:
    """Extracts the placeholder mapping from outline text."""
    return OutlineScanner(bullet=bullet, strict=strict).scan(markdown.split("\n"))


def parse_markdown_file(markdown_path: str, bullet: str = DEFAULT_BULLET, strict: bool = False) -> Dict[str, str]:
    """
    Reads a Markdown file and extracts its placeholder mapping.

    Read errors are not caught here; a missing or unreadable file is fatal
    for the caller.
    """
    logger.info("Parsing outline: %s", markdown_path)
    with open(markdown_path, "r", encoding="utf-8") as handle:
        markdown = handle.read()
    return extract_outline_data(markdown, bullet=bullet, strict=strict)
