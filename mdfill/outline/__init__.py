"""
Outline extraction module.

Architecture:
    - constants: line kinds, markers, bullet glyph, TextSpan
    - errors: exceptions raised in strict mode
    - sanitize: heading/label text -> kebab-case placeholder keys
    - extraction: the single-pass OutlineScanner
    - post_processing: bullet normalization and emphasis handling

Usage:
    >>> from mdfill.outline import extract_outline_data
    >>> extract_outline_data("## Section One\\n### Field A\\nHello\\n")
    {'section-one-field-a': 'Hello'}
"""

from .constants import LineKind, TextSpan, DEFAULT_BULLET
from .errors import OutlineError, MalformedLineError
from .sanitize import sanitize_key, strip_key_chars, to_kebab_case
from .extraction import (
    OutlineScanner,
    ScannerState,
    classify_line,
    extract_outline_data,
    parse_markdown_file,
)
from .post_processing import (
    build_replacements,
    process_value,
    split_emphasis_spans,
    strip_emphasis,
)

__all__ = [
    "LineKind",
    "TextSpan",
    "DEFAULT_BULLET",
    "OutlineError",
    "MalformedLineError",
    "sanitize_key",
    "strip_key_chars",
    "to_kebab_case",
    "OutlineScanner",
    "ScannerState",
    "classify_line",
    "extract_outline_data",
    "parse_markdown_file",
    "build_replacements",
    "process_value",
    "split_emphasis_spans",
    "strip_emphasis",
]
