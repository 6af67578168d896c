"""Type definitions for the litedown emphasis pass."""

from enum import Enum
from typing import Any, Dict, List, NamedTuple, NotRequired, Set, Tuple, TypedDict


class TagKind(Enum):
    """Kinds of spans produced by the emphasis pass."""

    EM = "em"
    STRONG = "strong"

    @property
    def markupLength(self) -> int:
        """Number of markup characters consumed by each tag of this kind."""
        return 1 if self is TagKind.EM else 2


class DelimiterRun(NamedTuple):
    """A maximal run of one markup character."""

    pos: int
    length: int

    @property
    def end(self) -> int:
        return self.pos + self.length


class Flanking(NamedTuple):
    """Result of classifying a delimiter run.

    Attributes:
        canOpen: Run is not followed by whitespace or text end
        canClose: Run is not preceded by whitespace or text start
        closeLen: Closing units carried by the run (0 when it cannot close, max 3)
    """

    canOpen: bool
    canClose: bool
    closeLen: int

    @property
    def closesEm(self) -> bool:
        """One unit (alone or next to two others) may close an EM span."""
        return self.closeLen in (1, 3)

    @property
    def closesStrong(self) -> bool:
        """Two units may close a STRONG span."""
        return self.closeLen >= 2


class TagPair(NamedTuple):
    """One resolved span: where its opening and closing markup lie in the text."""

    kind: TagKind
    openPos: int
    openLen: int
    closePos: int
    closeLen: int

    def openRange(self) -> range:
        return range(self.openPos, self.openPos + self.openLen)

    def closeRange(self) -> range:
        return range(self.closePos, self.closePos + self.closeLen)

    def claimedOffsets(self) -> Set[int]:
        """Every text offset consumed as markup by this pair."""
        return set(self.openRange()) | set(self.closeRange())

    def toDict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.name,
            "openPos": self.openPos,
            "openLen": self.openLen,
            "closePos": self.closePos,
            "closeLen": self.closeLen,
        }


class EmphasisRule(NamedTuple):
    """Markup character handled by one sub-pass and whether intraword runs are ignored."""

    character: str
    ignoreIntraword: bool = False


DEFAULT_RULES: Tuple[EmphasisRule, ...] = (
    EmphasisRule("*", ignoreIntraword=False),
    EmphasisRule("_", ignoreIntraword=True),
)


# The [emphasis] configuration section. TOML keys use dashes, so the functional form is needed.
EmphasisConfig = TypedDict(
    "EmphasisConfig",
    {
        "characters": NotRequired[List[str]],
        "intraword-characters": NotRequired[List[str]],
    },
)
