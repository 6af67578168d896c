from typing import Protocol

from .types import TagKind


class TagSink(Protocol):
    """
    Receiver of resolved emphasis spans.

    The emphasis pass calls addTagPair() once per resolved span. Calls are
    ordered by position only within one block of one markup character, so
    implementations must accept pairs in any global order. Anything that needs
    a single position-ordered sequence has to sort the pairs itself.
    """

    def addTagPair(self, kind: TagKind, openPos: int, openLen: int, closePos: int, closeLen: int) -> None:
        """
        Record one resolved span.

        Args:
            kind: TagKind.EM or TagKind.STRONG
            openPos: Offset of the opening markup in the text
            openLen: Length of the opening markup (1 for EM, 2 for STRONG)
            closePos: Offset of the closing markup in the text
            closeLen: Length of the closing markup, always equal to openLen
        """
        ...
