"""
Line classification: prefix matching, block rendering and the rule chain.
"""

import logging
from typing import NamedTuple

from .tag_catalog import TagKind, DEFAULT_CATALOG

logger = logging.getLogger('md2html')


class Rule(NamedTuple):
    prefix: str
    kind: TagKind


# Longest header prefixes first. Each header prefix carries its trailing
# space, so "##NoSpace" falls through to a paragraph.
DEFAULT_RULES = (
    Rule('###### ', TagKind.HEADER6),
    Rule('##### ', TagKind.HEADER5),
    Rule('#### ', TagKind.HEADER4),
    Rule('### ', TagKind.HEADER3),
    Rule('## ', TagKind.HEADER2),
    Rule('# ', TagKind.HEADER1),
    Rule('---', TagKind.HORIZONTAL_RULE),
)


def match_prefix(line: str, prefix: str) -> tuple[bool, str]:
    """
    Check whether a line starts with a literal prefix.

    Args:
        line: Single input line
        prefix: Literal prefix, compared as a whole

    Returns:
        (matched, remainder) where remainder has the prefix removed when
        matched and is the unchanged line otherwise. Empty lines never match.
    """
    if not line:
        return False, line
    if line.startswith(prefix):
        return True, line[len(prefix):]
    return False, line


def render_block(kind: TagKind, content: str, catalog=DEFAULT_CATALOG, fallback_element=None) -> str:
    return (catalog.opening_tag(kind, fallback_element) + content
            + catalog.closing_tag(kind, fallback_element))


class ClassificationChain:
    """Ordered prefix rules tried front to back, with a paragraph fallback."""

    def __init__(self, rules=DEFAULT_RULES, default_kind=TagKind.PARAGRAPH, catalog=DEFAULT_CATALOG):
        self.rules = tuple(Rule(prefix, kind) for prefix, kind in rules)
        self.default_kind = default_kind
        self.catalog = catalog
        self._warn_shadowed_rules()

    def _warn_shadowed_rules(self):
        for idx, rule in enumerate(self.rules):
            for earlier in self.rules[:idx]:
                if rule.prefix.startswith(earlier.prefix):
                    logger.warning(
                        "Rule %r (%s) can never match: shadowed by earlier rule %r (%s)",
                        rule.prefix, rule.kind.value, earlier.prefix, earlier.kind.value
                    )
                    break

    def match(self, line: str) -> tuple[TagKind, str]:
        """Return the kind of the first matching rule and the stripped remainder."""
        for rule in self.rules:
            matched, remainder = match_prefix(line, rule.prefix)
            if matched:
                return rule.kind, remainder
        return self.default_kind, line

    def classify(self, line: str, fallback_element=None) -> str:
        kind, content = self.match(line)
        return render_block(kind, content, self.catalog, fallback_element)


DEFAULT_CHAIN = ClassificationChain()
