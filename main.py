"""
Litedown emphasis tool - resolve * and _ emphasis in Markdown-like text.

Reads text from files or stdin, splits it into paragraphs and prints the
resolved EM/STRONG tag pairs as JSON, or the text annotated with tags.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from internal.config.manager import ConfigManager
from lib.litedown import EmphasisPass, ParserText, TagCollector
from lib.logging_utils import initLogging

# Configure basic logging first
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.WARNING)
logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"


class EmphasisTool:
    """Wires configuration, logging and the emphasis pass together."""

    def __init__(self, configPath: str = "config.toml", configDirs: Optional[List[str]] = None):
        self.configManager = ConfigManager(configPath, configDirs)
        initLogging(self.configManager.getLoggingConfig())
        self.emphasisPass = EmphasisPass.fromConfig(self.configManager.getEmphasisConfig())

    def resolve(self, rawText: str) -> Tuple[ParserText, TagCollector]:
        """Mark paragraph boundaries in rawText and resolve its emphasis."""
        text = ParserText(rawText)
        boundaries = text.markParagraphBoundaries()
        collector = TagCollector()
        count = self.emphasisPass.parse(text, collector)
        logger.info(f"Resolved {count} tag pair(s) in {boundaries + 1} block(s)")
        return text, collector

    def processText(self, source: str, rawText: str) -> Dict[str, Any]:
        _, collector = self.resolve(rawText)
        return {
            "source": source,
            "pairs": [pair.toDict() for pair in collector.getSortedPairs()],
        }

    def annotateText(self, rawText: str) -> str:
        text, collector = self.resolve(rawText)
        return collector.annotate(text.text)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Resolve * and _ emphasis into EM/STRONG tag pairs")
    parser.add_argument(
        "inputs",
        nargs="*",
        default=[STDIN_SOURCE],
        help="Files to process, '-' or nothing reads stdin",
    )
    parser.add_argument(
        "-c",
        "--config",
        default="config.toml",
        help="Path to configuration file (default: config.toml)",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "annotate"],
        default="json",
        help="Output tag pairs as JSON or the text annotated with tags (default: json)",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration and exit",
    )
    return parser.parse_args(argv)


def prettyPrintConfig(configManager: ConfigManager) -> None:
    """Pretty-print the loaded configuration."""
    print("=== Litedown Configuration ===")
    print()
    try:
        print(json.dumps(configManager.config, indent=2, ensure_ascii=False, sort_keys=True))
    except (TypeError, ValueError) as e:
        # Fallback to basic dict representation if JSON serialization fails
        logger.warning(f"Could not serialize config as JSON: {e}")
        for key, value in sorted(configManager.config.items()):
            print(f"{key}: {value}")


def readInput(source: str) -> str:
    if source == STDIN_SOURCE:
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    try:
        tool = EmphasisTool(args.config, args.config_dir)
    except ValueError as e:
        logger.error(f"Invalid emphasis configuration: {e}")
        return 1

    if args.print_config:
        prettyPrintConfig(tool.configManager)
        return 0

    exitCode = 0
    results: List[Dict[str, Any]] = []
    for source in args.inputs:
        try:
            rawText = readInput(source)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {source}: {e}")
            exitCode = 1
            continue

        if args.format == "annotate":
            print(tool.annotateText(rawText))
        else:
            results.append(tool.processText(source, rawText))

    if args.format == "json":
        print(json.dumps(results, indent=2, ensure_ascii=False))

    return exitCode


if __name__ == "__main__":
    sys.exit(main())
