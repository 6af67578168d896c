"""
Delimiter scanner for the emphasis pass.

Finds maximal runs of one markup character and groups them by block. Blocks
are separated by BLOCK_BREAK; a run belongs to the block that contains it.
"""

import logging
import re
from typing import List

from .text import BLOCK_BREAK, ParserText
from .types import DelimiterRun, EmphasisRule

logger = logging.getLogger(__name__)


def _getRunPattern(character: str) -> re.Pattern[str]:
    # re keeps its own cache of compiled patterns
    return re.compile(re.escape(character) + "+")


def isIgnoredRun(text: ParserText, rule: EmphasisRule, run: DelimiterRun) -> bool:
    """Single intraword characters (foo_bar_baz) never take part in emphasis."""
    return rule.ignoreIntraword and run.length == 1 and text.isSurroundedByAlnum(run.pos, run.length)


def getRunsByBlock(text: ParserText, rule: EmphasisRule, pos: int = 0) -> List[List[DelimiterRun]]:
    """
    Split the delimiter runs of rule.character into blocks.

    Args:
        text: Text to scan
        rule: Markup character to look for and its ignore rule
        pos: Position of the first occurrence of the character

    Returns:
        One list of runs per block, in text order. Blocks may be empty,
        ignored runs are left out.
    """
    blocks: List[List[DelimiterRun]] = []
    block: List[DelimiterRun] = []
    breakPos = _findBreak(text, pos)

    for match in _getRunPattern(rule.character).finditer(text.text, pos):
        run = DelimiterRun(match.start(), match.end() - match.start())

        # We've just passed the end of a block
        if run.pos > breakPos:
            blocks.append(block)
            block = []
            breakPos = _findBreak(text, run.pos)

        if isIgnoredRun(text, rule, run):
            logger.debug(f"Ignoring intraword {rule.character!r} at {run.pos}")
            continue
        block.append(run)
    blocks.append(block)

    return blocks


def _findBreak(text: ParserText, pos: int) -> int:
    breakPos = text.indexOf(BLOCK_BREAK, pos)
    return len(text) if breakPos < 0 else breakPos
