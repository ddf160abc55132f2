"""
Email Data Model
Contains the immutable HeaderField and ParsedMessage types produced by the parser
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple


class HeaderField(NamedTuple):
    """One header line (after unfolding), name case preserved"""
    name: str
    value: str


@dataclass(frozen=True)
class ParsedMessage:
    """
    Container for a parsed email

    headers keeps every header in file order, duplicates included
    (several Received lines, or a forged second From). sender, recipient
    and subject are the values of the first From, To and Subject headers.
    body is None when the message has no blank line separating it from
    the headers; an empty body after a separator is "".
    """
    headers: Tuple[HeaderField, ...] = ()
    body: Optional[str] = None
    sender: Optional[str] = None
    recipient: Optional[str] = None
    subject: Optional[str] = None

    @property
    def has_body(self) -> bool:
        return self.body is not None

    @property
    def header_count(self) -> int:
        return len(self.headers)

    def get_header(self, name: str) -> Optional[str]:
        """Value of the first header called name (case-insensitive), or None"""
        wanted = name.lower()
        for header in self.headers:
            if header.name.lower() == wanted:
                return header.value
        return None

    def get_all(self, name: str) -> List[str]:
        """Values of every header called name, in file order"""
        wanted = name.lower()
        return [header.value for header in self.headers if header.name.lower() == wanted]
