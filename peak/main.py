#!/usr/bin/env python3
"""
PEAK - Phishing Email Analysis Kit
Loads .eml files, parses them and prints each part in its own pane
"""

import sys
import logging
from pathlib import Path
from typing import Iterable

from peak.utils.config import Config
from peak.utils.colors import Colors
from peak.utils.logging_formatter import LogFormatter
from peak.utils.structured_logging import JSONFormatter
from peak.modules.dropped_file import DroppedFile
from peak.modules.email_parser import EmailParser, ParseError
from peak.modules.analysis_session import AnalysisSession
from peak.modules.pane_renderer import PaneRenderer


class PhishingAnalysisKit:
    """Loads files, runs the analysis and prints the panes"""

    def __init__(self, config_file: str = ".env", stream=None):
        """
        Initialize the kit

        Args:
            config_file: Path to configuration file (optional on disk)
            stream: Where panes are printed (default: stdout)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = Config(config_file)
        self.config.validate()

        self._setup_logging()
        self.logger = logging.getLogger("PhishingAnalysisKit")

        self.stream = stream if stream is not None else sys.stdout
        self.parser = EmailParser.from_config(self.config.parser)
        self.renderer = PaneRenderer(
            use_color=self.config.display.color and Colors.supported(self.stream)
        )

    def _setup_logging(self):
        """Setup logging configuration"""
        system = self.config.system

        # Resolve log level with safe fallback
        level_name = str(system.log_level).upper()
        level = logging._nameToLevel.get(level_name, logging.INFO)

        # Panes go to stdout; log records go to stderr
        console = logging.StreamHandler(sys.stderr)
        if system.log_format == "json":
            console.setFormatter(JSONFormatter())
        else:
            console.setFormatter(LogFormatter(use_color=Colors.supported(sys.stderr)))
        handlers = [console]

        if system.log_file:
            log_path = Path(system.log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
            if system.log_format == "json":
                file_handler.setFormatter(JSONFormatter())
            else:
                file_handler.setFormatter(LogFormatter(use_color=False))
            handlers.append(file_handler)

        logging.basicConfig(level=level, handlers=handlers)

        if level_name not in logging._nameToLevel:
            logging.getLogger("PhishingAnalysisKit").warning(
                f"Invalid log level '{system.log_level}'; defaulting to INFO"
            )

    def analyze_file(self, path) -> bool:
        """
        Analyze a single .eml file and print its panes

        Args:
            path: File to analyze

        Returns:
            True if the file was parsed
        """
        try:
            dropped = DroppedFile.from_path(path, self.config.parser.max_message_bytes)
        except (OSError, ParseError) as e:
            self.logger.error(f"Could not load {path}: {e}")
            return False

        session = AnalysisSession(self.parser)
        session.drop([dropped])
        self.logger.info(f"Loaded {dropped.describe()}")

        message = session.analyze(self.config.display.default_panes)
        print(self.renderer.render(session), file=self.stream)
        return message is not None

    def analyze_files(self, paths: Iterable) -> int:
        """
        Analyze each file in turn

        Returns:
            Number of files that were parsed
        """
        parsed = 0
        for path in paths:
            if self.analyze_file(path):
                parsed += 1
        return parsed


def main():
    """Main entry point"""
    from peak.app_runner import AppRunner
    sys.exit(AppRunner().run())


if __name__ == "__main__":
    main()
