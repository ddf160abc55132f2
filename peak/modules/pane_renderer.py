"""
Console Pane Renderer
Prints each part of an analysed message as its own titled block

SECURITY STORY: Header values and body text come straight from the sample.
Everything is passed through sanitize_for_display so a crafted message
cannot smuggle ANSI escape sequences into the analyst's terminal.
"""

from typing import Iterable, List, Tuple

from .analysis_session import AnalysisSession
from .email_data import HeaderField
from ..utils.colors import Colors
from ..utils.sanitization import sanitize_for_display


RULE_WIDTH = 80


def flatten_headers(headers: Iterable[HeaderField]) -> List[Tuple[int, str, str]]:
    """
    Number headers for display, starting at 1

    Example:
        >>> flatten_headers([HeaderField("From", "a@x.com"), HeaderField("To", "b@y.com")])
        [(1, 'From', 'a@x.com'), (2, 'To', 'b@y.com')]
    """
    return [(index, header.name, header.value) for index, header in enumerate(headers, start=1)]


class PaneRenderer:
    """Renders the visible panes of an AnalysisSession as text"""

    def __init__(self, use_color: bool = True):
        self.use_color = use_color

    def render(self, session: AnalysisSession) -> str:
        """All visible panes, in display order"""
        renderers = {
            "body": self.render_body,
            "html": self.render_html,
            "headers": self.render_headers,
            "senders": self.render_senders,
            "recipients": self.render_recipients,
        }
        blocks = [renderers[pane](session) for pane in session.visibility.visible_panes()]
        return "\n".join(blocks)

    def render_body(self, session: AnalysisSession) -> str:
        # Titled after the analysed file
        return self._block(session.title, sanitize_for_display(session.body_text))

    def render_html(self, session: AnalysisSession) -> str:
        """Source of the body; rendering HTML is left to a browser"""
        return self._block("Email Body (source)", sanitize_for_display(session.body_text))

    def render_headers(self, session: AnalysisSession) -> str:
        lines = []
        for index, name, value in flatten_headers(session.headers):
            number = Colors.dim(f"{index:>3}.", self.use_color)
            label = Colors.label(sanitize_for_display(name), self.use_color)
            lines.append(f"{number} {label}: {sanitize_for_display(value)}")
        if not lines:
            lines.append(Colors.dim("(no headers)", self.use_color))
        return self._block("Headers", "\n".join(lines))

    def render_senders(self, session: AnalysisSession) -> str:
        return self._block("Senders", sanitize_for_display(session.sender_text))

    def render_recipients(self, session: AnalysisSession) -> str:
        return self._block("Recipients", sanitize_for_display(session.recipient_text))

    def _block(self, title: str, content: str) -> str:
        rule = Colors.colorize("=" * RULE_WIDTH, Colors.CYAN, self.use_color)
        heading = Colors.header(sanitize_for_display(title), self.use_color)
        return f"{rule}\n{heading}\n{rule}\n{content.rstrip()}\n"
