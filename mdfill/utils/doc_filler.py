import logging
import re
from copy import deepcopy
from typing import Dict, Iterator, List, Optional, Sequence, Set

from docx import Document
from docx.text.paragraph import Paragraph

from mdfill.outline.constants import TextSpan

logger = logging.getLogger(__name__)


def build_placeholder_regex(keys: Sequence[str], open_delim: str = "{", close_delim: str = "}") -> Optional[re.Pattern]:
    """Compiles one regex matching any of the keys between the delimiters, e.g. "{ key }"."""
    if not keys:
        return None
    # Longest first so "a-b" is not shadowed by "a"
    alternatives = "|".join(re.escape(key) for key in sorted(keys, key=len, reverse=True))
    return re.compile(re.escape(open_delim) + r"\s*(" + alternatives + r")\s*" + re.escape(close_delim))


def iter_paragraphs(container) -> Iterator[Paragraph]:
    """Yields every paragraph of a document part, descending into (nested) table cells."""
    for paragraph in container.paragraphs:
        yield paragraph
    for table in container.tables:
        for row in table.rows:
            for cell in row.cells:
                yield from iter_paragraphs(cell)


def iter_document_paragraphs(doc) -> Iterator[Paragraph]:
    """Body paragraphs first, then the headers and footers each section defines itself."""
    yield from iter_paragraphs(doc)
    for section in doc.sections:
        for part in (section.header, section.footer,
                     section.first_page_header, section.first_page_footer,
                     section.even_page_header, section.even_page_footer):
            # Reading a linked header would add an empty definition to the document
            if part.is_linked_to_previous:
                continue
            yield from iter_paragraphs(part)


def _new_run(paragraph: Paragraph, text: str, base_rpr, bold: bool = False, italic: bool = False):
    run = paragraph.add_run(text)
    if base_rpr is not None:
        run._r.insert(0, deepcopy(base_rpr))
    if bold:
        run.bold = True
    if italic:
        run.italic = True
    return run._r


def _run_at(runs, offsets: List[int], position: int) -> int:
    """Index of the run holding the character at position."""
    for index, run in enumerate(runs):
        if offsets[index] + len(run.text) > position:
            return index
    return len(runs) - 1


def _replace_match(paragraph: Paragraph, start: int, end: int, spans: List[TextSpan]) -> None:
    runs = paragraph.runs
    offsets = []
    offset = 0
    for run in runs:
        offsets.append(offset)
        offset += len(run.text)

    first_index = _run_at(runs, offsets, start)
    last_index = _run_at(runs, offsets, end - 1)
    first, last = runs[first_index], runs[last_index]
    head = first.text[:start - offsets[first_index]]
    tail = last.text[end - offsets[last_index]:]
    base_rpr = first._r.rPr

    anchor = first._r
    for span in spans:
        new_r = _new_run(paragraph, span.text, base_rpr, bold=span.bold, italic=span.italic)
        anchor.addnext(new_r)
        anchor = new_r

    if last_index == first_index:
        if tail:
            anchor.addnext(_new_run(paragraph, tail, base_rpr))
    elif tail:
        last.text = tail
    else:
        last._r.getparent().remove(last._r)

    for run in runs[first_index + 1:last_index]:
        run._r.getparent().remove(run._r)

    if head:
        first.text = head
    else:
        first._r.getparent().remove(first._r)


def replace_in_paragraph(paragraph: Paragraph, regex: re.Pattern, replacements: Dict[str, List[TextSpan]]) -> Set[str]:
    """
    Replaces the markers of one paragraph and returns the keys it filled.

    Word often splits a marker over several runs. Only the runs a marker
    touches are rewritten: text before and after the marker keeps its own
    run formatting, and the replacement spans take the formatting of the
    run where the marker starts, with their own bold/italic on top.
    """
    text = "".join(run.text for run in paragraph.runs)
    matches = list(regex.finditer(text))

    filled: Set[str] = set()
    # Right to left, so offsets of earlier markers stay valid
    for match in reversed(matches):
        key = match.group(1)
        _replace_match(paragraph, match.start(), match.end(), replacements[key])
        filled.add(key)
    return filled


def fill_word_document(template_path: str, replacements: Dict[str, List[TextSpan]], output_path: str,
                       open_delim: str = "{", close_delim: str = "}") -> List[str]:
    """
    Fills placeholders in a Word document with provided replacement spans.

    Markers whose key is not in replacements are left untouched. Keys that
    match no marker are logged as warnings; a missing placeholder is not an
    error.

    Returns:
        Sorted list of the keys that were filled at least once
    """
    try:
        doc = Document(template_path)
        regex = build_placeholder_regex(list(replacements), open_delim, close_delim)

        filled: Set[str] = set()
        if regex is not None:
            for paragraph in iter_document_paragraphs(doc):
                filled |= replace_in_paragraph(paragraph, regex, replacements)

        for key in sorted(set(replacements) - filled):
            logger.warning(f"Placeholder '{open_delim}{key}{close_delim}' not found in template {template_path}")

        doc.save(output_path)
        logger.info(f"Successfully created filled document: {output_path}")
        return sorted(filled)

    except Exception as e:
        logger.error(f"Error in fill_word_document: {e}")
        raise
