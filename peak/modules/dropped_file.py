"""
Dropped File Intake
A file handed to the tool (dropped on the window, or named on the command line)
"""

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .email_parser import MessageTooLargeError


UNKNOWN_NAME = "???"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DroppedFile:
    """
    A dropped file payload

    Any part may be missing: a drop from a browser has a name and bytes
    but no path, a drop from a file manager may have only a path.
    """
    path: Optional[str] = None
    name: str = ""
    mime: str = ""
    data: Optional[bytes] = None

    @property
    def display_name(self) -> str:
        """Path if known, else name, else "???" """
        if self.path:
            return self.path
        if self.name:
            return self.name
        return UNKNOWN_NAME

    @property
    def is_loadable(self) -> bool:
        """A file can be analysed once it has a path or a name"""
        return bool(self.path or self.name)

    def describe(self) -> str:
        """
        One line summary for the dropped files list

        Example:
            >>> DroppedFile(name="mail.eml", mime="message/rfc822", data=b"x" * 42).describe()
            'mail.eml (type: message/rfc822, 42 bytes)'
        """
        details = []
        if self.mime:
            details.append(f"type: {self.mime}")
        if self.data is not None:
            details.append(f"{len(self.data)} bytes")
        if not details:
            return self.display_name
        return f"{self.display_name} ({', '.join(details)})"

    @classmethod
    def from_path(cls, path, max_bytes: int = 0) -> "DroppedFile":
        """
        Load a file from disk

        SECURITY STORY: The size is checked with stat() before reading, and the
        read itself stops one byte past the cap, so an oversized sample (even
        one still growing) is never pulled into memory.

        Args:
            path: File to read
            max_bytes: Refuse larger files; 0 disables the cap

        Returns:
            DroppedFile with path, name, guessed MIME type and contents

        Raises:
            OSError: If the file cannot be read
            MessageTooLargeError: If the file exceeds max_bytes
        """
        file_path = Path(path)
        size = file_path.stat().st_size
        if max_bytes and size > max_bytes:
            raise MessageTooLargeError(size, max_bytes)

        with open(file_path, "rb") as f:
            data = f.read(max_bytes + 1) if max_bytes else f.read()
        if max_bytes and len(data) > max_bytes:
            raise MessageTooLargeError(len(data), max_bytes)

        mime, _ = mimetypes.guess_type(file_path.name)
        logger.debug(f"Loaded {file_path.name} ({len(data)} bytes)")

        return cls(
            path=str(file_path),
            name=file_path.name,
            mime=mime or "",
            data=data,
        )
