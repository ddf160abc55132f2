import sys
import signal
import argparse
import logging
from pathlib import Path
from typing import Optional, List, NoReturn

from peak.utils.colors import Colors
from peak.utils.config import ConfigurationError


EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


class AppRunner:
    """Encapsulates argument handling, startup checks and execution of the analysis kit."""

    def __init__(self, args: Optional[List[str]] = None) -> None:
        """
        Initialize the runner with CLI arguments.

        Args:
            args: Command line arguments without the program name (defaults to sys.argv[1:])
        """
        self.args = self.build_parser().parse_args(args if args is not None else sys.argv[1:])
        self.config_file = self.args.config
        self.files: List[str] = self.args.files

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="peak",
            description="Phishing Email Analysis Kit: show the parts of .eml files for manual review.",
        )
        parser.add_argument("files", nargs="+", metavar="FILE", help=".eml file(s) to analyze")
        parser.add_argument(
            "--config", default=".env",
            help="Environment file with PEAK_* and LOG_* settings (default: .env, optional)",
        )
        return parser

    def run(self) -> int:
        """
        Execute the main application flow.

        Returns:
            Process exit code
        """
        self.setup_signal_handlers()
        self.print_banner()

        if not self.check_files():
            return EXIT_FAILURE

        try:
            return self.start_analysis()
        except KeyboardInterrupt:
            print(f"\n{Colors.warning('Interrupted.', Colors.supported())}")
            return EXIT_INTERRUPTED

    def setup_signal_handlers(self) -> None:
        """Register handlers for graceful shutdown."""
        signal.signal(signal.SIGINT, self._signal_handler)
        signal.signal(signal.SIGTERM, self._signal_handler)

    @staticmethod
    def _signal_handler(signum, frame) -> NoReturn:
        """Handle shutdown signals."""
        raise KeyboardInterrupt

    def print_banner(self) -> None:
        """Print the application startup banner."""
        color = Colors.supported()
        print(Colors.colorize("=" * 80, Colors.CYAN, color))
        print(Colors.header("PEAK - Phishing Email Analysis Kit", color))
        print(Colors.dim("Headers, body, senders and recipients of .eml files", color))
        print(Colors.colorize("=" * 80, Colors.CYAN, color))
        print()

    def check_files(self) -> bool:
        """Report every argument that is not a readable file."""
        color = Colors.supported()
        missing = [name for name in self.files if not Path(name).is_file()]
        for name in missing:
            print(Colors.error(f"Error: '{name}' is not a file", color))
        return not missing

    def start_analysis(self) -> int:
        """Instantiate the kit and analyze every file."""
        from peak.main import PhishingAnalysisKit

        try:
            kit = PhishingAnalysisKit(self.config_file)
        except ConfigurationError as e:
            print(Colors.error(f"Configuration Error: {e}", Colors.supported()))
            return EXIT_FAILURE

        try:
            parsed = kit.analyze_files(self.files)
        except Exception as e:
            logging.getLogger("AppRunner").error(f"Fatal error: {e}", exc_info=True)
            return EXIT_FAILURE

        return EXIT_OK if parsed else EXIT_FAILURE
