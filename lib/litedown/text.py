"""
Text buffer shared by the inline passes.

ParserText wraps the block-delimited inline content. Hard block boundaries are
marked by overwriting one character with BLOCK_BREAK, so offsets never shift
once a boundary has been placed.
"""

import logging
import re

logger = logging.getLogger(__name__)

# Reserved control character marking a hard block boundary
BLOCK_BREAK = "\x17"

# A newline followed by one or more blank (whitespace-only) lines
_BLANK_LINES_PATTERN = re.compile(r"\n(?:[ \t\r\f\v]*\n)+")


class ParserText:
    """Text being parsed, with the boundary predicates used by the inline passes."""

    def __init__(self, text: str):
        if not isinstance(text, str):
            raise ValueError("Input must be a string")
        self.text = text

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def charAt(self, pos: int) -> str:
        """Character at pos, or an empty string outside of the text."""
        if 0 <= pos < len(self.text):
            return self.text[pos]
        return ""

    def indexOf(self, char: str, pos: int = 0) -> int:
        return self.text.find(char, pos)

    def markBoundary(self, pos: int) -> None:
        """Replace the character at pos with BLOCK_BREAK."""
        if not 0 <= pos < len(self.text):
            raise ValueError(f"Boundary position {pos} is outside of the text (length {len(self.text)})")
        self.text = self.text[:pos] + BLOCK_BREAK + self.text[pos + 1 :]

    def markParagraphBoundaries(self) -> int:
        """
        Mark a hard boundary between paragraphs.

        The first newline of every sequence of blank lines is replaced by
        BLOCK_BREAK.

        Returns:
            Number of boundaries marked
        """
        self.text, marked = _BLANK_LINES_PATTERN.subn(lambda match: BLOCK_BREAK + match.group()[1:], self.text)
        logger.debug(f"Marked {marked} paragraph boundaries")
        return marked

    @staticmethod
    def isWhitespace(char: str) -> bool:
        """Whitespace, the block sentinel and the empty string (outside of the text) all count."""
        return char == "" or char == BLOCK_BREAK or char.isspace()

    def isBeforeWhitespace(self, pos: int) -> bool:
        """Test whether the character after pos is whitespace or the text ends there."""
        return self.isWhitespace(self.charAt(pos + 1))

    def isAfterWhitespace(self, pos: int) -> bool:
        """Test whether the character before pos is whitespace or pos is the text start."""
        return self.isWhitespace(self.charAt(pos - 1))

    def isSurroundedByAlnum(self, pos: int, length: int) -> bool:
        """Test whether the characters right before pos and right after pos + length are alphanumeric."""
        return self.charAt(pos - 1).isalnum() and self.charAt(pos + length).isalnum()
