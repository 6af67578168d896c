"""
Litedown emphasis library

Resolves * and _ markup into EM and STRONG spans. The text is expected to be
already split into blocks by BLOCK_BREAK characters; spans never cross a
block boundary.

Example:
    >>> from lib.litedown import EmphasisPass, ParserText, TagCollector
    >>>
    >>> text = ParserText("**Bold** and *italic*\\n\\nNext paragraph")
    >>> text.markParagraphBoundaries()
    1
    >>> collector = TagCollector()
    >>> EmphasisPass().parse(text, collector)
    2
    >>> collector.annotate(text.text)
    '<STRONG>Bold</STRONG> and <EM>italic</EM>\\n\\nNext paragraph'
"""

from .collector import TagCollector
from .emphasis import EmphasisPass, SpanResolver, parseEmphasis
from .flanking import classifyRun
from .interface import TagSink
from .scanner import getRunsByBlock
from .text import BLOCK_BREAK, ParserText
from .types import DEFAULT_RULES, DelimiterRun, EmphasisConfig, EmphasisRule, Flanking, TagKind, TagPair

__all__ = [
    "BLOCK_BREAK",
    "DEFAULT_RULES",
    "DelimiterRun",
    "EmphasisConfig",
    "EmphasisPass",
    "EmphasisRule",
    "Flanking",
    "ParserText",
    "SpanResolver",
    "TagCollector",
    "TagKind",
    "TagPair",
    "TagSink",
    "classifyRun",
    "getRunsByBlock",
    "parseEmphasis",
]
