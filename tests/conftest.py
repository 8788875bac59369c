"""
Pytest configuration and fixtures for mdfill tests.

This module provides shared fixtures for all tests, including sample
outline documents and a factory that builds Word templates with python-docx.

Uses pathlib.Path for all file operations.
"""

import pytest
from pathlib import Path
from typing import Callable, List, Optional

from docx import Document


# ============================================================================
# SAMPLE OUTLINE FIXTURES
# ============================================================================

SAMPLE_OUTLINE = """# Project Handbook

Intro text outside any entry is ignored.

## Project Info
Project Owner
: Margaret H.

### Title
Apollo **Guidance** Computer

### Goals
- Land on the moon
+ Return *safely*

## Release_Notes 2024
### Summary
First line
Second line
"""


@pytest.fixture
def sample_outline() -> str:
    """Return a small outline exercising every line kind."""
    return SAMPLE_OUTLINE


@pytest.fixture
def markdown_file(tmp_path, sample_outline) -> Path:
    """Write the sample outline to a temporary .md file."""
    path = tmp_path / "handbook.md"
    path.write_text(sample_outline, encoding="utf-8")
    return path


# ============================================================================
# WORD TEMPLATE FIXTURES
# ============================================================================

@pytest.fixture
def make_template(tmp_path) -> Callable[..., Path]:
    """
    Factory building a .docx template in tmp_path.

    Args (of the returned callable):
        paragraphs: Body paragraph texts; a list item is split into one run per element
        cells: Texts for a one-row table, one cell each
        header: Optional header text (unlinks the first section's header)
        name: File name of the template

    Returns:
        Path: Path to the saved template
    """
    def _make(paragraphs: Optional[List] = None, cells: Optional[List[str]] = None,
              header: Optional[str] = None, name: str = "template.docx") -> Path:
        doc = Document()
        for item in paragraphs or []:
            if isinstance(item, (list, tuple)):
                paragraph = doc.add_paragraph()
                for run_text in item:
                    paragraph.add_run(run_text)
            else:
                doc.add_paragraph(item)
        if cells:
            table = doc.add_table(rows=1, cols=len(cells))
            for index, text in enumerate(cells):
                table.cell(0, index).text = text
        if header is not None:
            section_header = doc.sections[0].header
            section_header.is_linked_to_previous = False
            section_header.paragraphs[0].text = header
        path = tmp_path / name
        doc.save(str(path))
        return path

    return _make


@pytest.fixture
def read_body_text() -> Callable[[Path], List[str]]:
    """Return a helper reading the text of every body paragraph of a saved document."""
    def _read(path: Path) -> List[str]:
        return [paragraph.text for paragraph in Document(str(path)).paragraphs]

    return _read


# ============================================================================
# PYTEST CONFIGURATION HOOKS
# ============================================================================

def pytest_configure(config):
    """Configure pytest at startup."""
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "best_effort: emphasis heuristic, documented behavior but not guaranteed semantics"
    )


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to every test not marked as integration."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
