"""
Logging utilities for the litedown tools.
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def getLogLevelByStr(levelStr: str, default: Optional[int] = None) -> Optional[int]:
    """Get log level by string."""
    level = getattr(logging, str(levelStr).upper(), None)
    if not isinstance(level, int):
        logger.error(f"Invalid log level '{levelStr}'")
        return default
    return level


def _createConsoleHandler(config: Dict[str, Any], logLevel: int, formatter: logging.Formatter) -> logging.Handler:
    consoleLogLevel = getLogLevelByStr(config["console-level"], logLevel) if "console-level" in config else logLevel
    handler = logging.StreamHandler()
    handler.setLevel(consoleLogLevel if consoleLogLevel is not None else logLevel)
    handler.setFormatter(formatter)
    return handler


def _createFileHandler(config: Dict[str, Any], logLevel: int, formatter: logging.Formatter) -> logging.Handler:
    logFile = config["file"]
    Path(logFile).parent.mkdir(parents=True, exist_ok=True)

    fileLogLevel = getLogLevelByStr(config["file-level"], logLevel) if "file-level" in config else logLevel

    handler: logging.Handler
    if config.get("rotate", False):
        handler = TimedRotatingFileHandler(
            filename=logFile,
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(logFile, encoding="utf-8")
    handler.setLevel(fileLogLevel if fileLogLevel is not None else logLevel)
    handler.setFormatter(formatter)
    return handler


def configureLogger(localLogger: logging.Logger, config: Dict[str, Any]) -> None:
    """
    Configure one logger from a logging config table.

    Supported keys: propagate, level, format, console, console-level,
    file, file-level, rotate. Existing handlers are replaced.
    """
    if "propagate" in config:
        localLogger.propagate = bool(config["propagate"])

    if "level" in config:
        logLevel = getLogLevelByStr(config["level"])
        if logLevel is not None:
            localLogger.setLevel(logLevel)

    logLevel = localLogger.getEffectiveLevel()
    formatter = logging.Formatter(config.get("format", DEFAULT_LOG_FORMAT))

    # Clear existing handlers to avoid duplicates
    for handler in localLogger.handlers[:]:
        localLogger.removeHandler(handler)

    if config.get("console", False):
        localLogger.addHandler(_createConsoleHandler(config, logLevel, formatter))
        logger.info(f"Logging {localLogger.name} to console")

    if "file" in config:
        try:
            localLogger.addHandler(_createFileHandler(config, logLevel, formatter))
            logger.info(f"Logging {localLogger.name} to file: {config['file']}")
        except OSError as e:
            logger.error(f"Failed to setup file logging for {localLogger.name}: {e}")


def initLogging(config: Dict[str, Any]) -> None:
    """
    Configure logging from the [logging] config section.

    The root logger is configured from the top-level keys (WARNING by
    default), and every [logging.logger.<name>] table configures the logger
    with that name, e.g. "lib.litedown" to trace the emphasis pass.
    """
    rootLogger = logging.getLogger()
    rootLogger.setLevel(logging.WARNING)
    configureLogger(rootLogger, config)

    for loggerName, loggerConfig in config.get("logger", {}).items():
        logger.debug(f"Configuring logger '{loggerName}' with config {loggerConfig}")
        configureLogger(logging.getLogger(loggerName), loggerConfig)

    logger.info(f"Logging configured: root level={logging.getLevelName(rootLogger.getEffectiveLevel())}")
