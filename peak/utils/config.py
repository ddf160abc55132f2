"""
Configuration Management Module
Handles loading and validation of environment variables and settings
"""

import codecs
import os
from typing import List
from dataclasses import dataclass
from dotenv import load_dotenv


DEFAULT_MAX_MESSAGE_BYTES = 25 * 1024 * 1024
LOG_FORMATS = ("text", "json")
# Display order of the panes
PANES = ("body", "html", "headers", "senders", "recipients")


class ConfigurationError(ValueError):
    """Raised when a configuration value is present but unusable"""


@dataclass
class ParserConfig:
    """Configuration for the email parser"""
    encoding: str
    max_message_bytes: int  # 0 disables the cap


@dataclass
class DisplayConfig:
    """Configuration for console pane output"""
    color: bool
    default_panes: List[str]


@dataclass
class SystemConfig:
    """Configuration for system settings"""
    log_level: str
    log_file: str
    log_format: str


class Config:
    """Main configuration class"""

    def __init__(self, env_file: str = ".env"):
        """
        Initialize configuration from environment file

        The file is optional; values already present in the process
        environment take precedence over it.

        Args:
            env_file: Path to environment file (default: .env)
        """
        load_dotenv(env_file)

        self.parser = self._load_parser_config()
        self.display = self._load_display_config()
        self.system = self._load_system_config()

    def _load_parser_config(self) -> ParserConfig:
        """Load parser configuration"""
        return ParserConfig(
            encoding=os.getenv("PEAK_ENCODING", "utf-8"),
            max_message_bytes=self._get_int(
                "PEAK_MAX_MESSAGE_BYTES", DEFAULT_MAX_MESSAGE_BYTES
            ),
        )

    def _load_display_config(self) -> DisplayConfig:
        """Load display configuration"""
        return DisplayConfig(
            color=self._get_bool("PEAK_COLOR", True),
            default_panes=self._parse_panes(os.getenv("PEAK_DEFAULT_PANES", "")),
        )

    def _load_system_config(self) -> SystemConfig:
        """Load system configuration"""
        return SystemConfig(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", ""),
            log_format=os.getenv("LOG_FORMAT", "text").strip().lower(),
        )

    @staticmethod
    def _parse_panes(value: str) -> List[str]:
        """Normalize a comma separated pane list; empty means every pane."""
        panes = [
            pane.strip().lower()
            for pane in value.replace("\n", ",").split(",")
            if pane.strip()
        ]
        return panes or list(PANES)

    @staticmethod
    def _get_bool(key: str, default: bool = False) -> bool:
        """Convert environment variable to boolean"""
        value = os.getenv(key, str(default)).lower()
        return value in ('true', '1', 'yes', 'on')

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Convert environment variable to int"""
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got: {value!r}")

    def validate(self) -> bool:
        """
        Validate configuration

        Returns:
            True if configuration is valid

        Raises:
            ConfigurationError: If configuration is invalid
        """
        try:
            codecs.lookup(self.parser.encoding)
        except LookupError:
            raise ConfigurationError(f"Unknown encoding: {self.parser.encoding}")

        if self.parser.max_message_bytes < 0:
            raise ConfigurationError("PEAK_MAX_MESSAGE_BYTES must not be negative")

        unknown = [pane for pane in self.display.default_panes if pane not in PANES]
        if unknown:
            raise ConfigurationError(
                f"Unknown pane(s) in PEAK_DEFAULT_PANES: {', '.join(unknown)}"
            )

        if self.system.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}"
            )

        return True
