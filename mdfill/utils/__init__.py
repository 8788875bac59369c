"""
python-docx helpers for mdfill.
"""

from . import doc_filler
from . import template_utils
