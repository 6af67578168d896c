"""
Emphasis pass of the litedown inline parser.

Turns runs of * and _ into EM and STRONG tag pairs in a single forward scan
per block. Only one pending EM opening and one pending STRONG opening are
remembered at any time: a later opening of the same kind replaces the earlier
one, and whatever is still pending at the end of a block stays literal text.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .collector import TagCollector
from .flanking import MAX_RUN_UNITS, classifyRun
from .interface import TagSink
from .scanner import getRunsByBlock
from .text import BLOCK_BREAK, ParserText
from .types import DEFAULT_RULES, DelimiterRun, EmphasisConfig, EmphasisRule, TagKind, TagPair

logger = logging.getLogger(__name__)


class SpanResolver:
    """
    Resolution state for one block of one markup character.

    A new resolver must be created for every block, nothing carries over
    block boundaries.
    """

    def __init__(self, text: ParserText, sink: TagSink):
        self.text = text
        self.sink = sink
        self.emStart: Optional[int] = None
        self.strongStart: Optional[int] = None
        self.emitted = 0

    def processBlock(self, runs: Sequence[DelimiterRun]) -> int:
        """Process every run of the block in order, return the number of emitted pairs."""
        for run in runs:
            self.processRun(run)
        self.finish()
        return self.emitted

    def processRun(self, run: DelimiterRun) -> None:
        flanking = classifyRun(self.text, run)
        closeEm = flanking.closesEm and self.emStart is not None
        closeStrong = flanking.closesStrong and self.strongStart is not None
        emEnd = run.pos
        strongEnd = run.pos
        remaining = run.length

        self._adjustStartingPositions(closeEm)
        if closeEm and closeStrong:
            emEnd, strongEnd = self._adjustEndingPositions(emEnd, strongEnd)

        if closeEm:
            remaining -= 1
            self._emit(TagKind.EM, self.emStart, emEnd)
            self.emStart = None
        if closeStrong:
            remaining -= 2
            self._emit(TagKind.STRONG, self.strongStart, strongEnd)
            self.strongStart = None

        # Unused markup at the end of the run may open new spans
        remaining = min(remaining, MAX_RUN_UNITS) if flanking.canOpen else 0
        self._openSpans(run.end - remaining, remaining)

    def finish(self) -> None:
        """Drop whatever is still open at the end of the block."""
        if self.emStart is not None:
            logger.debug(f"Abandoning EM opened at {self.emStart}")
        if self.strongStart is not None:
            logger.debug(f"Abandoning STRONG opened at {self.strongStart}")
        self.emStart = None
        self.strongStart = None

    def _adjustStartingPositions(self, closeEm: bool) -> None:
        """
        Split a shared opening run between EM and STRONG.

        When both spans were opened by the same run, the span that closes
        first is the inner one. If EM closes now, STRONG took the first two
        characters and EM the third; otherwise EM took the first character
        and STRONG the next two. When both close at once STRONG ends up
        outer.
        """
        if self.emStart is None or self.emStart != self.strongStart:
            return
        if closeEm:
            self.emStart += 2
        else:
            self.strongStart = self.emStart + 1

    def _adjustEndingPositions(self, emEnd: int, strongEnd: int) -> Tuple[int, int]:
        """Both spans close on the same run: the one opened last closes first."""
        assert self.emStart is not None and self.strongStart is not None
        if self.emStart < self.strongStart:
            return emEnd + 2, strongEnd
        return emEnd, strongEnd + 1

    def _openSpans(self, pos: int, units: int) -> None:
        if units in (1, 3):
            self.emStart = pos
        if units >= 2:
            self.strongStart = pos

    def _emit(self, kind: TagKind, openPos: Optional[int], closePos: int) -> None:
        assert openPos is not None
        length = kind.markupLength
        self.sink.addTagPair(kind, openPos, length, closePos, length)
        self.emitted += 1


class EmphasisPass:
    """
    Runs span resolution once per markup character.

    Each character is handled independently of the others, in the order of
    the configured rules.
    """

    def __init__(self, rules: Optional[Sequence[EmphasisRule]] = None):
        self.rules = tuple(rules) if rules is not None else DEFAULT_RULES
        self._validateRules()

    @classmethod
    def fromConfig(cls, config: EmphasisConfig) -> "EmphasisPass":
        """
        Build a pass from the [emphasis] config section.

        Args:
            config: Dict with optional "characters" and "intraword-characters" lists

        Returns:
            Configured EmphasisPass

        Raises:
            ValueError: If a value is not a list of strings or a character is
                not a valid markup character
        """
        characters = _getCharacterList(config, "characters", [rule.character for rule in DEFAULT_RULES])
        if "intraword-characters" in config:
            intraword = _getCharacterList(config, "intraword-characters", [])
            for char in intraword:
                if char not in characters:
                    logger.warning(f"Intraword character {char!r} is not an emphasis character, ignoring it")
        else:
            intraword = [rule.character for rule in DEFAULT_RULES if rule.ignoreIntraword]

        return cls([EmphasisRule(char, ignoreIntraword=char in intraword) for char in characters])

    def _validateRules(self) -> None:
        seen = set()
        for rule in self.rules:
            char = rule.character
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"Emphasis character must be a single character, got {char!r}")
            if char.isalnum() or char.isspace() or char == BLOCK_BREAK:
                raise ValueError(f"Invalid emphasis character {char!r}")
            if char in seen:
                raise ValueError(f"Duplicate emphasis character {char!r}")
            seen.add(char)

    def parse(self, text: ParserText, sink: TagSink) -> int:
        """
        Resolve emphasis for every configured character.

        Args:
            text: Block-delimited text
            sink: Receiver of the resolved tag pairs

        Returns:
            Total number of tag pairs emitted
        """
        return sum(self.parseCharacter(text, rule, sink) for rule in self.rules)

    def parseCharacter(self, text: ParserText, rule: EmphasisRule, sink: TagSink) -> int:
        """Resolve emphasis for a single markup character."""
        pos = text.indexOf(rule.character)
        if pos < 0:
            return 0

        blocks = getRunsByBlock(text, rule, pos)
        logger.debug(f"Found {len(blocks)} block(s) with {rule.character!r} runs")

        return sum(SpanResolver(text, sink).processBlock(block) for block in blocks)

    def parseText(self, text: str) -> List[TagPair]:
        """Parse a plain string and return its tag pairs sorted by position."""
        collector = TagCollector()
        self.parse(ParserText(text), collector)
        return collector.getSortedPairs()


def _getCharacterList(config: EmphasisConfig, key: str, default: List[str]) -> List[str]:
    value = config.get(key, default)
    if not isinstance(value, (list, tuple)) or not all(isinstance(char, str) for char in value):
        raise ValueError(f"[emphasis] {key} must be a list of strings, got {value!r}")
    return list(value)


def parseEmphasis(text: str) -> List[TagPair]:
    """Parse emphasis in text with the default * and _ rules."""
    return EmphasisPass().parseText(text)
