import logging
from .colors import Colors


class LogFormatter(logging.Formatter):
    """Custom formatter for colored console output"""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.GREY,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def __init__(self, use_color: bool = True):
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        self.use_color = use_color

    def _format_string(self, levelno: int) -> str:
        if not self.use_color:
            return "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        level_color = self.LEVEL_COLORS.get(levelno, Colors.GREEN)
        return (
            f"{Colors.GREY}%(asctime)s{Colors.RESET} - "
            f"{Colors.CYAN}%(name)s{Colors.RESET} - "
            f"{level_color}%(levelname)s{Colors.RESET} - %(message)s"
        )

    def format(self, record):
        formatter = logging.Formatter(self._format_string(record.levelno), datefmt=self.datefmt)
        return formatter.format(record)
