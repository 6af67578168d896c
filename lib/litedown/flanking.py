"""Flanking classification of emphasis delimiter runs."""

from .text import ParserText
from .types import DelimiterRun, Flanking

# A single run never supplies more than one unit to EM plus two to STRONG
MAX_RUN_UNITS = 3


def classifyRun(text: ParserText, run: DelimiterRun) -> Flanking:
    """
    Decide whether a delimiter run may open a span, close one, or both.

    Args:
        text: Text containing the run
        run: The delimiter run to classify

    Returns:
        Flanking with canOpen, canClose and the number of closing units
    """
    canOpen = not text.isBeforeWhitespace(run.end - 1)
    canClose = not text.isAfterWhitespace(run.pos)
    closeLen = min(run.length, MAX_RUN_UNITS) if canClose else 0

    return Flanking(canOpen=canOpen, canClose=canClose, closeLen=closeLen)
