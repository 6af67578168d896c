"""
Pytest configuration and common fixtures for the litedown tests.

All fixtures follow camelCase naming convention.
"""

import logging
from pathlib import Path

import pytest

from lib.litedown import TagCollector

# ============================================================================
# Logging
# ============================================================================


@pytest.fixture(autouse=True)
def restoreRootLogger():
    """
    Restore the root logger after a test.

    Running the command line reconfigures logging from the config file,
    which would otherwise leak into later tests.
    """
    rootLogger = logging.getLogger()
    level = rootLogger.level
    handlers = rootLogger.handlers[:]
    yield
    for handler in rootLogger.handlers[:]:
        if handler not in handlers:
            handler.close()
    rootLogger.handlers[:] = handlers
    rootLogger.setLevel(level)


# ============================================================================
# Input Fixtures
# ============================================================================


@pytest.fixture
def tagCollector() -> TagCollector:
    """
    Provide an empty tag collector.

    Returns:
        TagCollector: Collector to pass as tag sink
    """
    return TagCollector()


@pytest.fixture
def sampleDocument() -> str:
    """
    Provide a two-paragraph document with an unterminated span in the first paragraph.

    Returns:
        str: Markdown-like text
    """
    return "Some **bold** and *open\n\nnext *italic* foo_bar_baz\n"


@pytest.fixture
def missingConfigPath(tmp_path: Path) -> str:
    """
    Provide a config path that does not exist, so defaults are used.

    Returns:
        str: Path to a nonexistent config file
    """
    return str(tmp_path / "nonexistent.toml")
