"""Logging setup for the lgremote command line tool."""

from __future__ import annotations

import logging
import sys

from lgremote.config.settings import LoggingConfig

# httpx logs every request at INFO; only show it when debugging
_NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure the ``lgremote`` logger from the logging settings.

    Diagnostics go to stderr so they never mix with the per-device report
    printed on stdout. Calling this again replaces the handlers installed
    by the previous call.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).
    """
    if config is None:
        config = LoggingConfig()

    level = getattr(logging, config.level.upper(), logging.INFO)
    package_logger = logging.getLogger("lgremote")
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if config.file:
        file_handler = logging.FileHandler(config.file)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else logging.WARNING)

    package_logger.debug("Logging initialized at %s level", config.level)
