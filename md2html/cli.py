"""
md2html - Markdown to HTML Converter

A line-oriented converter for headers, horizontal rules and paragraphs.
"""

import argparse
import copy
import sys
import json
import os
import logging

from .MarkdownToHtml import MarkdownToHtml
from .exceptions import Md2HtmlError
from .config import DEFAULT_CONFIG
from . import __version__

logger = logging.getLogger('md2html')


def setup_logging(verbose=False, quiet=False):
    """Configure logging based on CLI flags.

    Args:
        verbose: If True, show DEBUG level messages
        quiet: If True, suppress all non-error output
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger = logging.getLogger('md2html')
    # Repeated main() calls in one process must not stack handlers
    for old_handler in list(root_logger.handlers):
        root_logger.removeHandler(old_handler)
    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="md2html",
        description="Convert Markdown headers, rules and paragraphs to HTML.",
        epilog="Examples:\n"
               "  md2html input.md -o output.html\n"
               "  md2html input.md -o page.html --standalone\n"
               "  md2html input.md -o debug.json\n"
               "  md2html input.md > output.html",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("input_file", help="Input Markdown file (.md, .markdown, .txt)")
    parser.add_argument("-o", "--output", required=False, default=None,
                        help="Output file (.html, .htm, .json for debug). Defaults to stdout.")
    parser.add_argument("-s", "--standalone", action="store_true", default=False,
                        help="Wrap output in a complete HTML page")
    parser.add_argument("--no-frontmatter", action="store_true", default=False,
                        help="Do not strip YAML front matter from the input")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", default=False,
                        help="Show detailed debug output")
    parser.add_argument("-q", "--quiet", action="store_true", default=False,
                        help="Suppress all non-error output")

    args = parser.parse_args(argv)

    # Set up logging
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    config = DEFAULT_CONFIG
    if args.no_frontmatter:
        config = copy.copy(DEFAULT_CONFIG)
        config.PARSE_FRONTMATTER = False

    input_file = args.input_file

    # Validate input is Markdown
    input_ext = os.path.splitext(input_file)[1].lower()
    if input_ext not in config.INPUT_EXTENSIONS:
        logger.error("Only Markdown files are supported. Got: %s", input_ext)
        sys.exit(1)

    if not os.path.exists(input_file):
        logger.error("Input file not found: %s", input_file)
        sys.exit(1)

    output_ext = os.path.splitext(args.output)[1].lower() if args.output else None

    try:
        if args.output is None:
            converter = MarkdownToHtml.load(input_file, config=config)
            sys.stdout.write(converter.convert_page() if args.standalone else converter.convert())
            sys.stdout.write("\n")

        elif output_ext in [".htm", ".html"]:
            MarkdownToHtml.convert_to_html(input_file, args.output, standalone=args.standalone, config=config)
            logger.info("Successfully converted to %s", args.output)

        elif output_ext == ".json":
            # Debug: output the line classification
            records = MarkdownToHtml.load(input_file, config=config).classify_lines()
            with open(args.output, 'w', encoding='utf-8') as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            logger.info("Successfully wrote line classification to %s", args.output)

        else:
            logger.error("Unsupported output format: %s", output_ext)
            logger.error("Supported formats: .html, .htm, .json")
            sys.exit(1)

    except Md2HtmlError as e:
        logger.error("%s", e)
        sys.exit(1)
    except Exception as e:
        logger.error("Unexpected error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
