"""Tests for YAML front matter parsing."""

from md2html.frontmatter_parser import (
    parse_markdown_with_frontmatter,
    parse_markdown_string_with_frontmatter,
    get_title,
)


class TestParseFrontmatter:
    """Test front matter extraction."""

    def test_string_with_frontmatter(self):
        metadata, content = parse_markdown_string_with_frontmatter(
            "---\ntitle: Doc Title\nauthor: Name\n---\n# Heading"
        )
        assert metadata == {"title": "Doc Title", "author": "Name"}
        assert content == "# Heading"

    def test_string_without_frontmatter(self):
        metadata, content = parse_markdown_string_with_frontmatter("# Heading\nbody")
        assert metadata == {}
        assert content == "# Heading\nbody"

    def test_non_mapping_block_is_content(self):
        text = "---\nplain\n---\nmore"
        assert parse_markdown_string_with_frontmatter(text) == ({}, text)

    def test_empty_block_is_content(self):
        text = "---\n---\nbody"
        assert parse_markdown_string_with_frontmatter(text) == ({}, text)

    def test_unclosed_block_is_content(self):
        text = "---\ntitle: T\nbody"
        assert parse_markdown_string_with_frontmatter(text) == ({}, text)

    def test_body_is_verbatim(self):
        metadata, content = parse_markdown_string_with_frontmatter("---\ntitle: T\n---\n\n # x \n\n")
        assert metadata == {"title": "T"}
        assert content == "\n # x \n\n"

    def test_leading_whitespace_without_frontmatter(self):
        assert parse_markdown_string_with_frontmatter(" # Title\nx\n") == ({}, " # Title\nx\n")

    def test_file_with_frontmatter(self, write_md):
        path = write_md("---\ntitle: From File\n---\nbody")
        metadata, content = parse_markdown_with_frontmatter(path)
        assert metadata["title"] == "From File"
        assert content == "body"


class TestGetTitle:
    """Test title lookup."""

    def test_title_present(self):
        assert get_title({"title": "Hello"}, "Document") == "Hello"

    def test_title_missing(self):
        assert get_title({}, "Document") == "Document"

    def test_blank_title(self):
        assert get_title({"title": "   "}, "Document") == "Document"

    def test_non_string_title(self):
        assert get_title({"title": 2025}, "Document") == "2025"

    def test_list_title(self):
        assert get_title({"title": ["Part", "One"]}, "Document") == "Part One"
