"""
mdfill - fill Word templates from Markdown outlines.

The package is organized into:
    - outline: the Markdown outline extractor (headings, definition entries,
      key sanitization, value post-processing)
    - utils: python-docx collaborators (placeholder filler, template inspector)
    - config: runtime settings loaded from the environment / .env file
"""

__version__ = "0.3.0"
