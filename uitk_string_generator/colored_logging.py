"""
Colored console logging for the UI Toolkit string generator.

Level colours make warnings and per-target failures stand out when both the
stylesheet and the markup class are generated in one run.
"""

import logging
import sys
from typing import Optional, Tuple


class ColoredFormatter(logging.Formatter):
    """
    Logging formatter that wraps records in ANSI colour codes.

    ERROR/CRITICAL and WARNING records always get their level colour. INFO
    and DEBUG records are coloured by the marker prefixed by the ``log_*``
    helpers below.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }

    SPECIAL_COLORS = {
        'success': '\033[92m',    # Bright Green
        'progress': '\033[94m',   # Bright Blue
        'highlight': '\033[96m',  # Bright Cyan
    }

    RESET = '\033[0m'
    BOLD = '\033[1m'

    SUCCESS_MARKER = "✓"
    PROGRESS_MARKER = "→"
    HIGHLIGHT_MARKER = "•"
    SECTION_MARKER = "="

    def __init__(self, fmt: Optional[str] = None, use_colors: bool = True):
        """
        Initialize the colored formatter.

        Args:
            fmt: Log format string (uses default if None)
            use_colors: Whether to use colors; ignored when stderr is not a TTY
        """
        super().__init__(fmt or "%(levelname)s: %(message)s")
        self.use_colors = use_colors and hasattr(sys.stderr, 'isatty') and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        formatted_message = super().format(record)
        if not self.use_colors:
            return formatted_message

        prefix, suffix = self._color_for(record)
        if not prefix:
            return formatted_message
        return f"{prefix}{formatted_message}{suffix}"

    def _color_for(self, record: logging.LogRecord) -> Tuple[str, str]:
        """Pick the escape sequence for a record; empty prefix means plain."""
        if record.levelname in ('ERROR', 'CRITICAL', 'WARNING'):
            return self.COLORS[record.levelname], self.RESET

        message = record.getMessage().lstrip()
        if message.startswith(self.SUCCESS_MARKER):
            return f"{self.SPECIAL_COLORS['success']}{self.BOLD}", self.RESET
        if message.startswith(self.PROGRESS_MARKER):
            return self.SPECIAL_COLORS['progress'], self.RESET
        if message.startswith(self.HIGHLIGHT_MARKER):
            return self.SPECIAL_COLORS['highlight'], self.RESET
        if message.startswith(self.SECTION_MARKER) or message.isupper():
            return f"{self.BOLD}{self.SPECIAL_COLORS['highlight']}", self.RESET
        if record.levelname == 'DEBUG':
            return self.COLORS['DEBUG'], self.RESET
        return "", ""


def setup_colored_logging(level: int = logging.INFO, use_colors: bool = True) -> None:
    """
    Install a single colored stderr handler on the root logger.

    Args:
        level: Logging level (default: INFO)
        use_colors: Whether to use colors (default: True)
    """
    root_logger = logging.getLogger()

    # Remove existing handlers to avoid duplicate lines on repeated setup
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter(use_colors=use_colors))
    console_handler.setLevel(level)

    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)


def get_colored_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)


def log_success(logger: logging.Logger, message: str) -> None:
    """Log a success message with special formatting."""
    logger.info(f"{ColoredFormatter.SUCCESS_MARKER} {message}")


def log_progress(logger: logging.Logger, message: str) -> None:
    """Log a progress message with special formatting."""
    logger.info(f"{ColoredFormatter.PROGRESS_MARKER} {message}")


def log_highlight(logger: logging.Logger, message: str) -> None:
    """Log a highlighted message with special formatting."""
    logger.info(f"{ColoredFormatter.HIGHLIGHT_MARKER} {message}")


def log_section(logger: logging.Logger, section_name: str) -> None:
    """Log a section header with special formatting."""
    separator = ColoredFormatter.SECTION_MARKER * 60
    logger.info(separator)
    logger.info(f"  {section_name.upper()}")
    logger.info(separator)
