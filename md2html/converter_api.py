"""
High-level convenience API for md2html.

Provides simple functions to convert Markdown strings to HTML without needing
to understand the internal pipeline.
"""

import yaml

from .MarkdownToHtml import MarkdownToHtml
from .frontmatter_parser import parse_markdown_string_with_frontmatter, get_title
from .config import DEFAULT_CONFIG
from .exceptions import ConversionError, InputError


def to_html(text):
    """Convert Markdown text to HTML fragments. Never raises for str input."""
    return MarkdownToHtml.to_html(text)


def render(text, config=None):
    """Render text for a live preview.

    Empty input is answered with the configured EMPTY_INPUT_HTML instead of
    calling the converter.
    """
    if config is None:
        config = DEFAULT_CONFIG
    if not text:
        return config.EMPTY_INPUT_HTML
    return MarkdownToHtml.to_html(text, config=config)


def convert_string(markdown_string, output_path=None, standalone=False, config=None):
    """Convert a Markdown string to HTML.

    Args:
        markdown_string: Markdown-formatted text (may include YAML frontmatter)
        output_path: Optional output .html path. Nothing is written if None.
        standalone: Wrap the fragments in a complete HTML page
        config: Optional ConversionConfig instance. Uses DEFAULT_CONFIG if None.

    Returns:
        The converted HTML.

    Raises:
        InputError: If the front matter is not valid YAML.
        ConversionError: If the output file cannot be written.
    """
    if config is None:
        config = DEFAULT_CONFIG

    metadata = {}
    content = markdown_string
    if config.PARSE_FRONTMATTER:
        try:
            metadata, content = parse_markdown_string_with_frontmatter(markdown_string)
        except yaml.YAMLError as e:
            raise InputError(f"Invalid front matter: {e}") from e

    converter = MarkdownToHtml(content, config=config, title=get_title(metadata, config.DEFAULT_TITLE))
    final_html = converter.convert_page() if standalone else converter.convert()

    if output_path is not None:
        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(final_html)
        except OSError as e:
            raise ConversionError(f"Failed to write {output_path}: {e}") from e

    return final_html
