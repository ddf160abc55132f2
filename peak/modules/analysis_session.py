"""
Analysis Session
Holds the dropped files and the result of the last "Analyze" action

MAINTENANCE WISDOM: The parser returns None for anything it could not
find. Turning None into the text an analyst reads ("Failed to parse
body") happens here, at the presentation boundary.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from .dropped_file import DroppedFile
from .email_data import HeaderField, ParsedMessage
from .email_parser import EmailParser, ParseError
from .view_state import PaneVisibility
from ..utils.sanitization import sanitize_for_logging


DEFAULT_TITLE = "Email"
NO_FILE_LOADED = "No email file loaded"
BODY_PLACEHOLDER = "Failed to parse body"
SENDER_PLACEHOLDER = "Failed to parse sender"
RECIPIENT_PLACEHOLDER = "Failed to parse recipient"
SUBJECT_PLACEHOLDER = "(no subject)"


class AnalysisSession:
    """State of one analysis window"""

    def __init__(self, parser: Optional[EmailParser] = None,
                 visibility: Optional[PaneVisibility] = None):
        """
        Args:
            parser: Parser to use (default options if omitted)
            visibility: Initial pane state (all hidden if omitted)
        """
        self.parser = parser or EmailParser()
        self.visibility = visibility or PaneVisibility()
        self.dropped_files: List[DroppedFile] = []
        self.title = DEFAULT_TITLE
        self.message: Optional[ParsedMessage] = None
        self.last_error: Optional[ParseError] = None
        self.logger = logging.getLogger("AnalysisSession")

    def drop(self, files: Iterable[DroppedFile]) -> None:
        """Replace the dropped files; an empty drop keeps the previous ones"""
        files = list(files)
        if files:
            self.dropped_files = files

    @property
    def can_analyze(self) -> bool:
        return any(f.is_loadable for f in self.dropped_files)

    def analyze(self, panes: Optional[Iterable[str]] = None) -> Optional[ParsedMessage]:
        """
        Parse the most recently dropped file

        Opens the panes, then parses. A parse failure is logged and leaves
        the session without a message, so every pane shows its placeholder.

        Args:
            panes: Pane names to open; every pane when omitted

        Returns:
            The ParsedMessage, or None if there was nothing to parse or
            parsing failed
        """
        if panes is None:
            self.visibility.show_all()
        else:
            self.visibility.hide_all()
            for pane in panes:
                self.visibility.set(pane, True)

        if not self.dropped_files:
            self.logger.info("Analyze requested with no dropped files")
            return None

        dropped = self.dropped_files[-1]
        self.title = dropped.display_name
        safe_title = sanitize_for_logging(self.title)

        self.message = None
        self.last_error = None

        raw = NO_FILE_LOADED if dropped.data is None else dropped.data

        try:
            self.message = self.parser.parse(raw)
        except ParseError as e:
            self.last_error = e
            self.logger.error(f"Failed to parse {safe_title}: {e}")
            return None

        self.logger.info(
            f"Analysis complete: {safe_title} "
            f"({self.message.header_count} headers, "
            f"body {'present' if self.message.has_body else 'absent'})"
        )
        return self.message

    @property
    def headers(self) -> Tuple[HeaderField, ...]:
        return self.message.headers if self.message is not None else ()

    @property
    def body_text(self) -> str:
        return self._or_placeholder("body", BODY_PLACEHOLDER)

    @property
    def sender_text(self) -> str:
        return self._or_placeholder("sender", SENDER_PLACEHOLDER)

    @property
    def recipient_text(self) -> str:
        return self._or_placeholder("recipient", RECIPIENT_PLACEHOLDER)

    @property
    def subject_text(self) -> str:
        return self._or_placeholder("subject", SUBJECT_PLACEHOLDER)

    def _or_placeholder(self, field: str, placeholder: str) -> str:
        if self.message is None:
            return placeholder
        value = getattr(self.message, field)
        return placeholder if value is None else value
