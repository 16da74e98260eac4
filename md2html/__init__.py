"""
md2html - Convert Markdown to HTML

This package provides a line-oriented converter that maps header, horizontal
rule and paragraph lines to their HTML elements.
"""

from .MarkdownToHtml import MarkdownToHtml
from .classifier import ClassificationChain, Rule, DEFAULT_RULES, match_prefix, render_block
from .document import MarkdownDocument
from .tag_catalog import TagKind, TagCatalog, DEFAULT_CATALOG
from .frontmatter_parser import (
    parse_markdown_with_frontmatter,
    parse_markdown_string_with_frontmatter,
)
from .config import ConversionConfig, DEFAULT_CONFIG
from .exceptions import Md2HtmlError, InputError, ConversionError, SecurityError
from .converter_api import to_html, render, convert_string

__version__ = "0.1.0"
__all__ = [
    "MarkdownToHtml",
    "ClassificationChain",
    "Rule",
    "DEFAULT_RULES",
    "match_prefix",
    "render_block",
    "MarkdownDocument",
    "TagKind",
    "TagCatalog",
    "DEFAULT_CATALOG",
    "parse_markdown_with_frontmatter",
    "parse_markdown_string_with_frontmatter",
    "ConversionConfig",
    "DEFAULT_CONFIG",
    "Md2HtmlError",
    "InputError",
    "ConversionError",
    "SecurityError",
    "to_html",
    "render",
    "convert_string",
]
