"""
Sanitization Utility Module
Cleans attacker-controlled email text before it reaches a log file or a terminal.

SECURITY STORY: Every header value and body line in a phishing sample is
chosen by the attacker. Printed raw, an ANSI escape sequence can rewrite
the analyst's terminal (hide a line, fake a "From:" value) and a CRLF can
forge extra log entries.
"""

import re
import unicodedata

# CSI / single-character escape sequences (colors, cursor movement, title changes),
# in both the 7-bit ESC form and the 8-bit C1 CSI form
ANSI_ESCAPE_PATTERN = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])|\x9B[0-?]*[ -/]*[@-~]')

# Bidirectional embedding, override and isolate controls
BIDI_CONTROLS = frozenset(
    '\u202a\u202b\u202c\u202d\u202e'
    '\u2066\u2067\u2068\u2069'
)


def _strip_control(text: str, keep: str) -> str:
    text = ANSI_ESCAPE_PATTERN.sub('', text)
    return "".join(
        ch for ch in text
        if ch in keep
        or (unicodedata.category(ch) != 'Cc' and ch not in BIDI_CONTROLS)
    )


def sanitize_for_logging(text: str, max_length: int = 255) -> str:
    """
    Sanitize text for safe logging to prevent Log Injection (CRLF) and terminal manipulation.

    Args:
        text: The input string to sanitize.
        max_length: Maximum allowed length for the log entry (truncates if longer).

    Returns:
        Sanitized single-line string safe for logging.
    """
    if not text:
        return ""

    text = unicodedata.normalize('NFKC', text)

    # Escape line breaks so one email can never produce two log records
    text = text.replace('\n', '\\n').replace('\r', '\\r')

    text = _strip_control(text, keep='\t')

    if len(text) > max_length:
        text = text[:max_length] + "..."

    return text


def sanitize_for_display(text: str) -> str:
    """
    Sanitize multi-line text for printing in a console pane.

    Unlike sanitize_for_logging, line structure is kept (the body pane must
    read like the original message) and nothing is truncated or normalized,
    so look-alike characters stay visible to the analyst.

    Args:
        text: Header value or body text.

    Returns:
        Text with escape sequences and control characters removed.
    """
    if not text:
        return ""
    text = text.replace('\r\n', '\n').replace('\r', '\n')
    return _strip_control(text, keep='\t\n')
