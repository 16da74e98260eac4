"""Tests for TagKind and TagCatalog."""

import pytest

from md2html.config import DEFAULT_CONFIG
from md2html.tag_catalog import TagKind, TagCatalog, TAG_ELEMENTS, DEFAULT_CATALOG


class TestTagElements:
    """Test the default element mapping."""

    def test_every_kind_has_an_element(self):
        for kind in TagKind:
            assert kind in TAG_ELEMENTS

    @pytest.mark.parametrize("level", range(1, 7))
    def test_header_elements(self, level):
        kind = TagKind[f"HEADER{level}"]
        assert DEFAULT_CATALOG.element_name(kind) == f"h{level}"

    def test_paragraph_and_rule(self):
        assert DEFAULT_CATALOG.element_name(TagKind.PARAGRAPH) == 'p'
        assert DEFAULT_CATALOG.element_name(TagKind.HORIZONTAL_RULE) == 'hr'


class TestTagStrings:
    """Test opening and closing tag construction."""

    def test_opening_tag(self, catalog):
        assert catalog.opening_tag(TagKind.HEADER1) == '<h1>'

    def test_closing_tag(self, catalog):
        assert catalog.closing_tag(TagKind.HEADER1) == '</h1>'

    def test_horizontal_rule_has_closing_tag(self, catalog):
        assert catalog.opening_tag(TagKind.HORIZONTAL_RULE) == '<hr>'
        assert catalog.closing_tag(TagKind.HORIZONTAL_RULE) == '</hr>'


class TestTagFallback:
    """Missing entries fall back to the paragraph element."""

    def test_missing_kind_uses_paragraph(self):
        catalog = TagCatalog({TagKind.HEADER1: 'h1'})
        assert catalog.element_name(TagKind.HEADER4) == 'p'
        assert catalog.opening_tag(TagKind.HEADER4) == '<p>'
        assert catalog.closing_tag(TagKind.HEADER4) == '</p>'

    def test_unknown_key_does_not_raise(self, catalog):
        assert catalog.element_name("not-a-kind") == 'p'

    def test_explicit_fallback_element(self):
        catalog = TagCatalog({})
        assert catalog.opening_tag(TagKind.PARAGRAPH, 'div') == '<div>'
        assert catalog.closing_tag(TagKind.PARAGRAPH, 'div') == '</div>'

    def test_default_config_fallback_read_per_lookup(self, monkeypatch):
        monkeypatch.setattr(DEFAULT_CONFIG, 'FALLBACK_ELEMENT', 'span')
        assert TagCatalog({}).element_name(TagKind.HEADER1) == 'span'


class TestTagCatalogImmutability:
    """The catalog does not change after construction."""

    def test_source_mapping_changes_do_not_leak(self):
        elements = dict(TAG_ELEMENTS)
        catalog = TagCatalog(elements)
        elements[TagKind.HEADER1] = 'strong'
        assert catalog.element_name(TagKind.HEADER1) == 'h1'

    def test_elements_is_read_only(self, catalog):
        with pytest.raises(TypeError):
            catalog.elements[TagKind.HEADER1] = 'strong'

    def test_reverse_lookup(self, catalog):
        assert catalog.kind_for_element('h3') is TagKind.HEADER3
        assert catalog.kind_for_element('table') is None
