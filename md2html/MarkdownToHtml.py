import html
import logging
import os

import yaml

from .classifier import DEFAULT_CHAIN
from .config import DEFAULT_CONFIG
from .document import MarkdownDocument
from .exceptions import InputError, ConversionError, SecurityError
from .frontmatter_parser import parse_markdown_with_frontmatter, get_title

logger = logging.getLogger('md2html')


class MarkdownToHtml:
    def __init__(self, text, chain=None, config=None, title=None):
        self.text = text
        self.chain = chain if chain is not None else DEFAULT_CHAIN
        self.config = config if config is not None else DEFAULT_CONFIG
        self.title = title

    @staticmethod
    def to_html(text, chain=None, config=None):
        """Convert Markdown text to an HTML fragment string."""
        return MarkdownToHtml(text, chain=chain, config=config).convert()

    @staticmethod
    def load(input_path, config=None):
        """
        Read a Markdown file into a converter.

        Front matter is stripped when config.PARSE_FRONTMATTER is set, and its
        title (if any) becomes the standalone page title.

        Raises:
            InputError: If the input file is missing, not UTF-8, or has
                invalid front matter.
            SecurityError: If the input file exceeds MAX_INPUT_FILE_SIZE.
        """
        if config is None:
            config = DEFAULT_CONFIG

        if not os.path.isfile(input_path):
            raise InputError(f"Input file not found: {input_path}")

        input_size = os.path.getsize(input_path)
        if input_size > config.MAX_INPUT_FILE_SIZE:
            raise SecurityError(
                f"Input file too large: {input_size} bytes (max {config.MAX_INPUT_FILE_SIZE} bytes)"
            )

        try:
            if config.PARSE_FRONTMATTER:
                metadata, content = parse_markdown_with_frontmatter(input_path)
            else:
                metadata = {}
                with open(input_path, "r", encoding="utf-8", newline="") as f:
                    content = f.read()
        except UnicodeDecodeError as e:
            raise InputError(f"Input file is not valid UTF-8: {input_path}") from e
        except yaml.YAMLError as e:
            raise InputError(f"Invalid front matter in {input_path}: {e}") from e

        return MarkdownToHtml(
            content,
            config=config,
            title=get_title(metadata, config.DEFAULT_TITLE),
        )

    @staticmethod
    def convert_to_html(input_path, output_path, standalone=False, config=None):
        """
        Convert a Markdown file to HTML.

        Args:
            input_path: Input Markdown file path
            output_path: Output HTML file path
            standalone: Wrap the fragments in a complete HTML page
            config: Optional ConversionConfig instance. Uses DEFAULT_CONFIG if None.

        Returns:
            The HTML that was written.

        Raises:
            InputError: If the input file is missing or unreadable.
            SecurityError: If the input file exceeds MAX_INPUT_FILE_SIZE.
            ConversionError: If the output file cannot be written.
        """
        converter = MarkdownToHtml.load(input_path, config=config)
        final_html = converter.convert_page() if standalone else converter.convert()

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(final_html)
        except OSError as e:
            raise ConversionError(f"Failed to write {output_path}: {e}") from e

        logger.debug("Wrote %d characters to %s", len(final_html), output_path)
        return final_html

    def lines(self):
        return self.text.split(self.config.LINE_SEPARATOR)

    def convert(self):
        document = MarkdownDocument()
        for line in self.lines():
            document.add(self.chain.classify(line, self.config.FALLBACK_ELEMENT))

        logger.debug("Converted %d lines", len(document))
        return document.get()

    def convert_page(self):
        body_content = self.convert()
        title = self.title or self.config.DEFAULT_TITLE

        # Wrap in HTML
        return f"""<!DOCTYPE html>
<html lang="{html.escape(self.config.HTML_LANG)}">
<head>
<meta charset="UTF-8">
<title>{html.escape(title)}</title>
<style>
  body {{ font-family: sans-serif; line-height: 1.6; max-width: 800px; margin: 0 auto; padding: 2rem; }}
</style>
</head>
<body>
{body_content}
</body>
</html>"""

    def classify_lines(self):
        """
        Describe how each line was classified (for debugging).

        Returns:
            List of {"line": int, "tag": str, "content": str}, one per line,
            with 1-based line numbers.
        """
        records = []
        for idx, line in enumerate(self.lines()):
            kind, content = self.chain.match(line)
            records.append({
                "line": idx + 1,
                "tag": kind.value,
                "content": content,
            })
        return records
