"""
Tests for the delimiter scanner: run detection, block splitting and ignored runs.
"""

import unittest

from .scanner import getRunsByBlock, isIgnoredRun
from .text import BLOCK_BREAK, ParserText
from .types import DelimiterRun, EmphasisRule

STAR = EmphasisRule("*")
UNDERSCORE = EmphasisRule("_", ignoreIntraword=True)


class TestRunDetection(unittest.TestCase):
    """Test detection of maximal runs."""

    def testMaximalRuns(self):
        blocks = getRunsByBlock(ParserText("a*b**c***"), STAR)
        self.assertEqual(blocks, [[DelimiterRun(1, 1), DelimiterRun(3, 2), DelimiterRun(6, 3)]])

    def testOtherCharacterIsNotMerged(self):
        """Runs of * and _ are found separately even when adjacent."""
        text = ParserText("*_*")
        self.assertEqual(getRunsByBlock(text, STAR), [[DelimiterRun(0, 1), DelimiterRun(2, 1)]])
        self.assertEqual(getRunsByBlock(text, UNDERSCORE), [[DelimiterRun(1, 1)]])

    def testRegexMetacharacter(self):
        """Markup characters are matched literally."""
        blocks = getRunsByBlock(ParserText("a+b++c.d"), EmphasisRule("+"))
        self.assertEqual(blocks, [[DelimiterRun(1, 1), DelimiterRun(3, 2)]])
        self.assertEqual(getRunsByBlock(ParserText("a.b"), EmphasisRule(".")), [[DelimiterRun(1, 1)]])

    def testStartPosition(self):
        """Scanning starts at the given position."""
        blocks = getRunsByBlock(ParserText("*a*"), STAR, 1)
        self.assertEqual(blocks, [[DelimiterRun(2, 1)]])

    def testNoRuns(self):
        self.assertEqual(getRunsByBlock(ParserText("plain text"), STAR), [[]])


class TestBlockSplitting(unittest.TestCase):
    """Test grouping of runs into blocks."""

    def testNoBreakIsOneBlock(self):
        blocks = getRunsByBlock(ParserText("*foo* and *bar*"), STAR)
        self.assertEqual(len(blocks), 1)
        self.assertEqual(len(blocks[0]), 4)

    def testRunsAreSplitAtBreaks(self):
        text = ParserText("*a" + BLOCK_BREAK + "b*" + BLOCK_BREAK + BLOCK_BREAK + "c*")
        blocks = getRunsByBlock(text, STAR)
        self.assertEqual(blocks, [[DelimiterRun(0, 1)], [DelimiterRun(4, 1)], [DelimiterRun(8, 1)]])

    def testEmptyBlockBeforeFirstRun(self):
        """A block without runs is still reported when the scan starts before it."""
        text = ParserText("a" + BLOCK_BREAK + "b*")
        self.assertEqual(getRunsByBlock(text, STAR), [[], [DelimiterRun(3, 1)]])
        self.assertEqual(getRunsByBlock(text, STAR, 3), [[DelimiterRun(3, 1)]])

    def testBlockWithOnlyIgnoredRuns(self):
        text = ParserText("_a_" + BLOCK_BREAK + "foo_bar")
        blocks = getRunsByBlock(text, UNDERSCORE)
        self.assertEqual(blocks, [[DelimiterRun(0, 1), DelimiterRun(2, 1)], []])


class TestIgnoredRuns(unittest.TestCase):
    """Test the intraword underscore exception."""

    def testIntrawordUnderscoreIsDropped(self):
        self.assertEqual(getRunsByBlock(ParserText("foo_bar_baz"), UNDERSCORE), [[]])

    def testOnlySingleUnderscoresAreDropped(self):
        blocks = getRunsByBlock(ParserText("foo__bar__baz"), UNDERSCORE)
        self.assertEqual(blocks, [[DelimiterRun(3, 2), DelimiterRun(8, 2)]])

    def testUnderscoreAtWordEdgeIsKept(self):
        blocks = getRunsByBlock(ParserText("_foo_ bar_"), UNDERSCORE)
        self.assertEqual(blocks, [[DelimiterRun(0, 1), DelimiterRun(4, 1), DelimiterRun(9, 1)]])

    def testStarHasNoIntrawordException(self):
        blocks = getRunsByBlock(ParserText("foo*bar*baz"), STAR)
        self.assertEqual(blocks, [[DelimiterRun(3, 1), DelimiterRun(7, 1)]])

    def testIsIgnoredRun(self):
        text = ParserText("a_b")
        self.assertTrue(isIgnoredRun(text, UNDERSCORE, DelimiterRun(1, 1)))
        self.assertFalse(isIgnoredRun(text, EmphasisRule("_"), DelimiterRun(1, 1)))


if __name__ == "__main__":
    unittest.main()
