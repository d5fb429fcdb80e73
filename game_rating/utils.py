"""
Shared utilities for the game rating package.
"""

import logging
import re
from typing import Optional

from .config import INT32_MAX, INT32_MIN, LOG_LEVEL
from .errors import InvalidIntegerError

# Optional sign followed by ASCII decimal digits, surrounding whitespace allowed
_INTEGER_RE = re.compile(r"^\s*([+-]?[0-9]+)\s*$")


def setup_logging(name: Optional[str] = None, level: int = LOG_LEVEL) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: config.LOG_LEVEL)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def parse_int(text: Optional[str]) -> int:
    """
    Parse a line of console input as a 32-bit signed integer.

    Args:
        text: Raw input line, or None when the input stream is exhausted

    Returns:
        The parsed integer

    Raises:
        InvalidIntegerError: If the text is not a decimal integer in 32-bit range
    """
    if text is None:
        raise InvalidIntegerError("No input to parse")

    match = _INTEGER_RE.match(text)
    if match is None:
        raise InvalidIntegerError(f"Not an integer: {text!r}")

    value = int(match.group(1))
    if value < INT32_MIN or value > INT32_MAX:
        raise InvalidIntegerError(f"Integer out of range: {value}")

    return value
