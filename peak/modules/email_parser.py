"""
Email Parser Module
Turns the raw text of an .eml file into a structured ParsedMessage

PATTERN RECOGNITION: This follows the Parser pattern - unstructured input
(raw email text) becomes a structured, immutable object (ParsedMessage).
The parser is a pure function of its input: no I/O, no shared state.

SECURITY STORY: The files fed to this tool are phishing samples, so broken
or hostile header syntax is the normal case rather than the exception.
Parsing is therefore lenient: a header line that cannot be understood is
skipped and logged, and the rest of the message is still parsed. The only
hard failures are input that is not text in the expected encoding, and
input larger than the configured size cap.
"""

import codecs
import logging
import re
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .email_data import HeaderField, ParsedMessage
from ..utils.sanitization import sanitize_for_logging


RawMessage = Union[bytes, str]

# One physical line including its terminator; the last line may have none.
# Only CR, LF and CRLF end a line: str.splitlines() would also break on
# form feeds and Unicode separators that an attacker can hide in a header.
LINE_PATTERN = re.compile(r".*?(?:\r\n|\r|\n)|.+\Z", re.DOTALL)

FOLDING_WHITESPACE = (" ", "\t")
BYTE_ORDER_MARK = "\ufeff"

# Headers surfaced as ParsedMessage attributes, keyed by lowercase name
RESOLVED_FIELDS = {
    "from": "sender",
    "to": "recipient",
    "subject": "subject",
}


class ParseError(Exception):
    """Base class for messages that cannot be parsed at all"""


class InvalidEncodingError(ParseError):
    """Raw bytes are not valid text in the expected encoding"""

    def __init__(self, encoding: str, position: int, reason: str):
        self.encoding = encoding
        self.position = position
        self.reason = reason
        super().__init__(
            f"Message is not valid {encoding} text (byte {position}: {reason})"
        )


class MessageTooLargeError(ParseError):
    """Raw message exceeds the configured size cap"""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Message is {size} bytes, limit is {limit} bytes")


def split_lines(text: str) -> Iterator[str]:
    """Yield the lines of text, each with its original terminator"""
    for match in LINE_PATTERN.finditer(text):
        yield match.group(0)


class EmailParser:
    """
    Parses raw email text into ParsedMessage objects

    The header block is scanned in two states, InHeaders and then InBody
    after the first empty line; there is no way back. Folded header
    lines (starting with a space or tab) are joined onto the previous
    header with a single space.
    """

    def __init__(self, encoding: str = "utf-8", max_message_bytes: int = 0):
        """
        Initialize email parser

        Args:
            encoding: Codec used when raw input is bytes
            max_message_bytes: Reject larger input; 0 disables the cap

        Raises:
            ValueError: If the encoding is unknown or the cap is negative
        """
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {encoding}")
        if max_message_bytes < 0:
            raise ValueError("max_message_bytes must not be negative")

        self.encoding = encoding
        self.max_message_bytes = max_message_bytes
        self.logger = logging.getLogger("EmailParser")

    @classmethod
    def from_config(cls, config) -> "EmailParser":
        """
        Build a parser from a ParserConfig

        Args:
            config: ParserConfig with encoding and max_message_bytes
        """
        return cls(encoding=config.encoding, max_message_bytes=config.max_message_bytes)

    def parse(self, raw: RawMessage) -> ParsedMessage:
        """
        Parse a raw message

        Args:
            raw: Full .eml contents, as bytes or already-decoded text

        Returns:
            ParsedMessage; never None

        Raises:
            InvalidEncodingError: If bytes cannot be decoded
            MessageTooLargeError: If the input exceeds max_message_bytes
        """
        self._check_size(raw)
        text = self._decode(raw)

        lines = list(split_lines(text))
        headers, body_start = self._scan_headers(lines)

        body = None
        if body_start is not None:
            body = "".join(lines[body_start:])

        resolved = self._resolve_fields(headers)

        body_info = "absent" if body is None else f"{len(body)} chars"
        self.logger.debug(f"Parsed {len(headers)} header(s), body {body_info}")

        return ParsedMessage(
            headers=tuple(headers),
            body=body,
            sender=resolved.get("sender"),
            recipient=resolved.get("recipient"),
            subject=resolved.get("subject"),
        )

    def _check_size(self, raw: RawMessage) -> None:
        if not self.max_message_bytes:
            return
        if isinstance(raw, str):
            size = len(raw.encode(self.encoding, errors="replace"))
        else:
            size = len(raw)
        if size > self.max_message_bytes:
            raise MessageTooLargeError(size, self.max_message_bytes)

    def _decode(self, raw: RawMessage) -> str:
        """
        Turn raw input into text

        Strict decoding: replacing bad bytes would silently change what the
        analyst sees, so undecodable input is an error instead.
        """
        if isinstance(raw, str):
            text = raw
        else:
            try:
                text = bytes(raw).decode(self.encoding)
            except UnicodeDecodeError as e:
                raise InvalidEncodingError(self.encoding, e.start, e.reason) from e

        if text.startswith(BYTE_ORDER_MARK):
            text = text[1:]
        return text

    def _scan_headers(self, lines: List[str]) -> Tuple[List[HeaderField], Optional[int]]:
        """
        Collect header fields up to the first empty line

        Args:
            lines: Message lines with terminators

        Returns:
            Tuple of (headers in file order, index of the first body line
            or None when there is no header/body separator)
        """
        headers: List[HeaderField] = []
        name: Optional[str] = None
        parts: List[str] = []
        skipped = 0
        body_start: Optional[int] = None

        def flush():
            if name is not None:
                headers.append(HeaderField(name, " ".join(p for p in parts if p)))

        for index, line in enumerate(lines):
            content = line.rstrip("\r\n")

            if not content:
                body_start = index + 1
                break

            if content.startswith(FOLDING_WHITESPACE):
                if name is None:
                    # Continuation of nothing, or of a line we already dropped
                    skipped += 1
                    self._log_skipped(index, content, "continuation without a header")
                else:
                    parts.append(content.strip())
                continue

            flush()
            field_name, colon, value = content.partition(":")
            field_name = field_name.strip()

            if not colon or not field_name:
                name, parts = None, []
                skipped += 1
                self._log_skipped(index, content, "no header name" if colon else "no colon")
                continue

            name, parts = field_name, [value.strip()]

        flush()
        if skipped:
            self.logger.warning(f"Skipped {skipped} malformed header line(s)")
        return headers, body_start

    def _log_skipped(self, index: int, content: str, reason: str) -> None:
        safe_content = sanitize_for_logging(content, max_length=80)
        self.logger.debug(f"Skipping header line {index + 1} ({reason}): {safe_content}")

    @staticmethod
    def _resolve_fields(headers: List[HeaderField]) -> Dict[str, str]:
        """First From/To/Subject value by case-insensitive name, in one pass"""
        resolved: Dict[str, str] = {}
        for header in headers:
            attribute = RESOLVED_FIELDS.get(header.name.lower())
            if attribute and attribute not in resolved:
                resolved[attribute] = header.value
                if len(resolved) == len(RESOLVED_FIELDS):
                    break
        return resolved


_default_parser = EmailParser()


def parse(raw: RawMessage) -> ParsedMessage:
    """Parse raw email text with default options (UTF-8, no size cap)"""
    return _default_parser.parse(raw)
