"""
Configuration constants for md2html converter.

This module centralizes the default values used throughout the conversion
process. Values can be overridden by:
1. Instantiating ConversionConfig and assigning attributes
2. CLI arguments (--standalone, --no-frontmatter)
"""


class ConversionConfig:
    """Default configuration values for HTML conversion."""

    # === Line Splitting ===
    LINE_SEPARATOR = '\n'  # Input is split on this character only

    # === Tag Catalog ===
    FALLBACK_ELEMENT = 'p'  # Element used when a tag kind has no catalog entry

    # === Render Contract ===
    EMPTY_INPUT_HTML = '<p></p>'  # Substituted for empty input by render()

    # === Standalone Page ===
    DEFAULT_TITLE = 'Document'
    HTML_LANG = 'en'

    # === Front Matter ===
    PARSE_FRONTMATTER = True  # Strip YAML front matter from file/string input

    # === Input Files ===
    INPUT_EXTENSIONS = ('.md', '.markdown', '.txt')

    # === Security Limits ===
    MAX_INPUT_FILE_SIZE = 50 * 1024 * 1024  # 50 MB max input file


# Global default config instance
DEFAULT_CONFIG = ConversionConfig()
