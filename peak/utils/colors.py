"""
ANSI Color codes for console output formatting
"""

import os
import sys


class Colors:
    """ANSI color codes and helper methods"""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    UNDERLINE = "\033[4m"

    # Text Colors
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    GREY = "\033[90m"

    @staticmethod
    def supported(stream=None) -> bool:
        """
        Whether a stream should receive ANSI codes.

        Honours the NO_COLOR convention (https://no-color.org) and only
        colors interactive terminals.
        """
        if "NO_COLOR" in os.environ:
            return False
        stream = stream if stream is not None else sys.stdout
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    @classmethod
    def colorize(cls, text: str, color: str, enabled: bool = True) -> str:
        """Wrap text in color codes"""
        if not enabled:
            return text
        return f"{color}{text}{cls.RESET}"

    @classmethod
    def header(cls, text: str, enabled: bool = True) -> str:
        """Format as a pane title (Bold Cyan)"""
        return cls.colorize(text, cls.BOLD + cls.CYAN, enabled)

    @classmethod
    def label(cls, text: str, enabled: bool = True) -> str:
        """Format as a field label (Bold)"""
        return cls.colorize(text, cls.BOLD, enabled)

    @classmethod
    def dim(cls, text: str, enabled: bool = True) -> str:
        return cls.colorize(text, cls.GREY, enabled)

    @classmethod
    def warning(cls, text: str, enabled: bool = True) -> str:
        """Format as a warning (Yellow)"""
        return cls.colorize(text, cls.YELLOW, enabled)

    @classmethod
    def error(cls, text: str, enabled: bool = True) -> str:
        """Format as an error (Red)"""
        return cls.colorize(text, cls.RED, enabled)

    @classmethod
    def success(cls, text: str, enabled: bool = True) -> str:
        """Format as success (Green)"""
        return cls.colorize(text, cls.GREEN, enabled)
