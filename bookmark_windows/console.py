#!/usr/bin/env python3
"""Terminal colors and logging setup."""

import logging


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    GREY = "\033[90m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    RED_BACKGROUND = "\033[41m"


LEVEL_TAGS = {
    logging.DEBUG: (Colors.CYAN, "DEBG"),
    logging.INFO: (Colors.GREEN, "INFO"),
    logging.WARNING: (Colors.YELLOW, "WARN"),
    logging.ERROR: (Colors.RED, "ERRR"),
    logging.CRITICAL: (Colors.RED_BACKGROUND, "CRIT"),
}


class CustomFormatter(logging.Formatter):
    """Colored formatter with a short level tag after an HH:MM time."""

    def __init__(self):
        super().__init__()
        self.formatters = {
            level: logging.Formatter(
                f"{Colors.GREY}%(asctime)s{Colors.RESET} "
                f"{Colors.BOLD}{color}{tag}{Colors.RESET} %(message)s",
                datefmt="%H:%M",
            )
            for level, (color, tag) in LEVEL_TAGS.items()
        }

    def format(self, record: logging.LogRecord) -> str:
        formatter = self.formatters.get(record.levelno, self.formatters[logging.INFO])
        return formatter.format(record)


def setup_logging(verbose: bool = False, silent: bool = False):
    """Configure root logging with colored output."""
    if silent:
        logging.disable(logging.CRITICAL)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(CustomFormatter())

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, handlers=[handler], force=True)
