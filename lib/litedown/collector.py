"""List-backed tag sink."""

from typing import Dict, Iterator, List

from .text import BLOCK_BREAK
from .types import TagKind, TagPair


class TagCollector:
    """
    Collects tag pairs in the order they are reported.

    Pairs from different blocks and markup characters arrive in no particular
    global order, use getSortedPairs() for a position-ordered view.
    """

    def __init__(self):
        self.pairs: List[TagPair] = []

    def addTagPair(self, kind: TagKind, openPos: int, openLen: int, closePos: int, closeLen: int) -> None:
        self.pairs.append(TagPair(kind, openPos, openLen, closePos, closeLen))

    def getSortedPairs(self) -> List[TagPair]:
        """Pairs ordered by opening position, outer spans first when two open at the same offset."""
        return sorted(self.pairs, key=lambda pair: (pair.openPos, -pair.closePos))

    def clear(self) -> None:
        self.pairs.clear()

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[TagPair]:
        return iter(self.pairs)

    def annotate(self, text: str) -> str:
        """
        Render text with the claimed markup replaced by tag markers.

        This is a debugging view: "***foo***" becomes "<STRONG><EM>foo</EM></STRONG>".
        Block boundaries are shown as newlines.

        Args:
            text: The text the pairs were resolved against

        Returns:
            Annotated text
        """
        markers: Dict[int, str] = {}
        claimed = set()
        for pair in self.pairs:
            name = pair.kind.name
            markers[pair.openPos] = markers.get(pair.openPos, "") + f"<{name}>"
            markers[pair.closePos] = markers.get(pair.closePos, "") + f"</{name}>"
            claimed |= pair.claimedOffsets()

        parts: List[str] = []
        for pos, char in enumerate(text):
            if pos in markers:
                parts.append(markers[pos])
            if pos not in claimed:
                parts.append("\n" if char == BLOCK_BREAK else char)
        return "".join(parts)
