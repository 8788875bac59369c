"""
Unit tests for value post-processing (mdfill/outline/post_processing.py).

Bullet normalization is exact behavior. The emphasis span tests are marked
best_effort: the odd/even delimiter split is documented, not guaranteed to
produce sensible styling for unbalanced or nested markers.
"""

import pytest

from mdfill.outline.constants import TextSpan
from mdfill.outline.post_processing import (
    build_replacements,
    process_value,
    split_emphasis_spans,
    strip_emphasis,
)


class TestProcessValue:
    """Test bullet normalization."""

    def test_dash_and_plus_become_bullets(self):
        assert process_value("- first\n+ second\n") == "• first\n• second\n"

    def test_only_first_character_replaced(self):
        assert process_value("-- double") == "•- double"

    def test_marker_without_space(self):
        assert process_value("-tight") == "•tight"

    def test_other_lines_unchanged(self):
        assert process_value("plain\n* star\n1. one") == "plain\n* star\n1. one"

    def test_marker_in_middle_of_line_untouched(self):
        assert process_value("a - b") == "a - b"

    def test_custom_bullet(self):
        assert process_value("- item", bullet="▪") == "▪ item"

    def test_empty_value(self):
        assert process_value("") == ""


class TestStripEmphasis:
    """Emphasis delimiters never reach the filler."""

    def test_strip_bold_and_italic(self):
        assert strip_emphasis("a **bold** and *italic*") == "a bold and italic"

    def test_strip_unbalanced(self):
        assert strip_emphasis("5 * 3 = **15") == "5  3 = 15"


@pytest.mark.best_effort
class TestEmphasisSpans:
    """Best-effort bold/italic span heuristic."""

    def test_plain_text_single_span(self):
        assert split_emphasis_spans("plain") == [TextSpan("plain")]

    def test_bold_span(self):
        assert split_emphasis_spans("a **b** c") == [
            TextSpan("a "), TextSpan("b", bold=True), TextSpan(" c"),
        ]

    def test_italic_span(self):
        assert split_emphasis_spans("*x* y") == [TextSpan("x", italic=True), TextSpan(" y")]

    def test_italic_markers_inside_bold_dropped(self):
        assert split_emphasis_spans("**a *b* c**") == [TextSpan("a b c", bold=True)]

    def test_unbalanced_bold_styles_the_tail(self):
        """Known limitation: an unclosed marker styles everything after it."""
        assert split_emphasis_spans("x **y") == [TextSpan("x "), TextSpan("y", bold=True)]

    def test_spans_never_contain_delimiters(self):
        spans = split_emphasis_spans("***odd* mix** of *markers")
        assert all("*" not in span.text for span in spans)


class TestBuildReplacements:
    """Test conversion of the extracted mapping into filler input."""

    def test_with_styles(self):
        replacements = build_replacements({"k": "**Bold** text"})
        assert replacements == {"k": [TextSpan("Bold", bold=True), TextSpan(" text")]}

    def test_without_styles(self):
        replacements = build_replacements({"k": "**Bold** *it*"}, emphasis_styles=False)
        assert replacements == {"k": [TextSpan("Bold it")]}

    def test_empty_value_has_no_spans(self):
        assert build_replacements({"k": ""}) == {"k": []}
