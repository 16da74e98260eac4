"""
YAML front matter detection on top of python-frontmatter's YAML handler.

Only a leading block that loads as a mapping counts as front matter. The body
after the closing delimiter is returned exactly as written: leading spaces,
trailing blank lines and `---` rules all matter to the line converter.
"""

from frontmatter.default_handlers import YAMLHandler

_YAML_HANDLER = YAMLHandler()


def parse_markdown_string_with_frontmatter(markdown_text: str) -> tuple[dict, str]:
    """
    Separate a leading YAML mapping from a Markdown string.

    Args:
        markdown_text: Markdown content as string

    Returns:
        (metadata_dict, body). Without a delimited block, or when the block
        is not a mapping (e.g. text between two horizontal rules), metadata
        is {} and body is markdown_text unchanged.

    Raises:
        yaml.YAMLError: If the delimited block is not valid YAML.
    """
    if not _YAML_HANDLER.detect(markdown_text):
        return {}, markdown_text

    lines = markdown_text.split('\n')
    for idx in range(1, len(lines)):
        if _YAML_HANDLER.FM_BOUNDARY.match(lines[idx]):
            break
    else:
        return {}, markdown_text

    metadata = _YAML_HANDLER.load('\n'.join(lines[1:idx]))
    if not isinstance(metadata, dict):
        return {}, markdown_text
    return metadata, '\n'.join(lines[idx + 1:])


def parse_markdown_with_frontmatter(file_path: str) -> tuple[dict, str]:
    """Read a UTF-8 Markdown file (newlines untranslated) and split its front matter."""
    with open(file_path, 'r', encoding='utf-8', newline='') as f:
        return parse_markdown_string_with_frontmatter(f.read())


def get_title(metadata: dict, default: str) -> str:
    """Return the front matter title as text, or default when absent/blank."""
    title = metadata.get('title')
    if title is None:
        return default
    if isinstance(title, list):
        title = " ".join(str(t) for t in title)
    title = str(title).strip()
    return title or default
