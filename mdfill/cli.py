import argparse
import json
import logging
import os
import sys
import traceback
from typing import List, Optional

from .config import load_settings
from .outline import OutlineError, build_replacements, parse_markdown_file
from .utils.doc_filler import fill_word_document
from .utils.template_utils import compare_placeholders, extract_placeholders

EPILOG = """Examples:
  Generate document with default output name:
    mdfill --markdown handbook.md --template template.docx
  Generate document with custom output name:
    mdfill --markdown handbook.md --template template.docx --output final.docx
  Show the extracted placeholder mapping:
    mdfill --markdown handbook.md --dump
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdfill",
        description="Converts markdown documentation to Word document using a template.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-m", "--markdown", required=True, help="Input markdown file containing documentation content")
    parser.add_argument("-t", "--template", help="Input Word template document with {placeholders} (required unless --dump)")
    parser.add_argument("-o", "--output", help="Output Word document filename (default: input name with .docx extension)")
    parser.add_argument("-v", "--verbose", action="store_true", default=None, help="Enable verbose debugging output")
    parser.add_argument("--strict", action="store_true", default=None, help="Fail on malformed definition list entries")
    parser.add_argument("--no-styles", dest="emphasis_styles", action="store_false", default=None,
                        help="Strip **bold** / *italic* markers without styling the text")
    parser.add_argument("--list-placeholders", action="store_true",
                        help="List the template placeholders and which ones the markdown provides, then exit")
    parser.add_argument("--dump", action="store_true", help="Print the extracted mapping as JSON and exit")
    return parser


def default_output_path(markdown_path: str) -> str:
    return os.path.splitext(markdown_path)[0] + ".docx"


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(verbose=args.verbose, strict=args.strict, emphasis_styles=args.emphasis_styles)
    except ValueError as e:
        print(f"Error: Invalid configuration: {e}")
        return 1

    logging.basicConfig(level=logging.DEBUG if settings.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    # --- Input Validation ---
    if not os.path.exists(args.markdown):
        print(f"Error: Markdown file not found at {args.markdown}")
        return 1
    if not args.dump:
        if not args.template:
            print("Error: Template file path is required")
            return 1
        if not os.path.exists(args.template):
            print(f"Error: Template file not found at {args.template}")
            return 1

    output_path = args.output or default_output_path(args.markdown)
    output_dir = os.path.dirname(output_path)
    if not (args.dump or args.list_placeholders) and output_dir and not os.path.exists(output_dir):
        try:
            os.makedirs(output_dir)
        except OSError as e:
            print(f"Error creating output directory {output_dir}: {e}")
            return 1

    # --- Processing Steps ---
    try:
        # 1. Extract the placeholder mapping from the outline
        data = parse_markdown_file(args.markdown, bullet=settings.bullet, strict=settings.strict)

        if args.dump:
            print(json.dumps(data, indent=2, ensure_ascii=False, sort_keys=True))
            return 0

        # 2. Diagnostics: compare with the template's markers
        if args.list_placeholders:
            template_keys = extract_placeholders(args.template, settings.placeholder_open, settings.placeholder_close)
            report = compare_placeholders(template_keys, data)
            for key in template_keys:
                status = "ok" if key in data else "missing"
                print(f"{settings.placeholder_open}{key}{settings.placeholder_close}: {status}")
            for key in report["unused_in_template"]:
                print(f"(unused) {key}")
            return 0

        # 3. Fill the Word document
        logging.getLogger(__name__).debug("Will look for strings to replace now")
        replacements = build_replacements(data, emphasis_styles=settings.emphasis_styles)
        filled = fill_word_document(args.template, replacements, output_path,
                                    settings.placeholder_open, settings.placeholder_close)
        print(f"Filled {len(filled)} of {len(data)} placeholders into {output_path}")
        return 0

    except OutlineError as e:
        print(f"Error: {e}")
        return 1
    except Exception as e:
        print(f"An unexpected error occurred in main: {e}")
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
