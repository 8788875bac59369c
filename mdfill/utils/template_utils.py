import logging
import re
from typing import Dict, List, Set

from docx import Document

from .doc_filler import iter_document_paragraphs

logger = logging.getLogger(__name__)


def placeholder_pattern(open_delim: str = "{", close_delim: str = "}") -> re.Pattern:
    """Regex capturing the key of any marker such as "{ key }"."""
    return re.compile(re.escape(open_delim) + r"\s*([^" + re.escape(open_delim + close_delim) + r"]*?)\s*" + re.escape(close_delim))


def extract_placeholders(template_path: str, open_delim: str = "{", close_delim: str = "}") -> List[str]:
    """Reads the template and extracts all unique, cleaned placeholder keys."""
    logger.info(f"Extracting placeholders from: {template_path}")
    placeholders: Set[str] = set()
    doc = Document(template_path)
    regex = placeholder_pattern(open_delim, close_delim)

    for paragraph in iter_document_paragraphs(doc):
        for match in regex.findall(paragraph.text):
            cleaned_key = match.strip()
            if cleaned_key:
                placeholders.add(cleaned_key)

    if not placeholders:
        logger.warning(f"No placeholders found in {template_path}")
        return []

    logger.info(f"Found {len(placeholders)} unique placeholders.")
    return sorted(placeholders)


def compare_placeholders(template_keys: List[str], data: Dict[str, str]) -> Dict[str, List[str]]:
    """
    Splits template and outline keys into matched / template-only / outline-only.

    Diagnostic only: nothing requires every template marker to be provided.
    """
    template_set = set(template_keys)
    data_set = set(data)
    return {
        "matched": sorted(template_set & data_set),
        "missing_in_outline": sorted(template_set - data_set),
        "unused_in_template": sorted(data_set - template_set),
    }
