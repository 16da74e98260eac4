"""
Block tag kinds and their HTML element names.
"""

import logging
from enum import Enum
from types import MappingProxyType

from .config import DEFAULT_CONFIG

logger = logging.getLogger('md2html')


class TagKind(Enum):
    """Closed set of block tags recognised at the start of a line."""
    PARAGRAPH = 'Paragraph'
    HEADER1 = 'Header1'
    HEADER2 = 'Header2'
    HEADER3 = 'Header3'
    HEADER4 = 'Header4'
    HEADER5 = 'Header5'
    HEADER6 = 'Header6'
    HORIZONTAL_RULE = 'HorizontalRule'


# Default Element Mappings
TAG_ELEMENTS = {
    TagKind.PARAGRAPH: 'p',
    TagKind.HEADER1: 'h1',
    TagKind.HEADER2: 'h2',
    TagKind.HEADER3: 'h3',
    TagKind.HEADER4: 'h4',
    TagKind.HEADER5: 'h5',
    TagKind.HEADER6: 'h6',
    TagKind.HORIZONTAL_RULE: 'hr',
}


class TagCatalog:
    """Maps tag kinds to element names and builds opening/closing tags.

    The mapping is copied and frozen at construction, so a catalog can be
    shared between conversions without locking. The fallback element is
    resolved per lookup, from the caller or from DEFAULT_CONFIG.
    """

    def __init__(self, elements=None):
        if elements is None:
            elements = TAG_ELEMENTS
        self._elements = MappingProxyType(dict(elements))

    @property
    def elements(self):
        return self._elements

    def element_name(self, kind, fallback_element=None):
        element = self._elements.get(kind)
        if element is None:
            if fallback_element is None:
                fallback_element = DEFAULT_CONFIG.FALLBACK_ELEMENT
            logger.debug("No element for %r, using <%s>", kind, fallback_element)
            return fallback_element
        return element

    def opening_tag(self, kind, fallback_element=None):
        return f"<{self.element_name(kind, fallback_element)}>"

    def closing_tag(self, kind, fallback_element=None):
        return f"</{self.element_name(kind, fallback_element)}>"

    def kind_for_element(self, element):
        """Reverse lookup: element name -> TagKind, or None if unknown."""
        for kind, name in self._elements.items():
            if name == element:
                return kind
        return None


DEFAULT_CATALOG = TagCatalog()
