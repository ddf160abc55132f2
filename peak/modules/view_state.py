"""
Pane Visibility State
Which display panes are open. Holds no message data.
"""

from dataclasses import dataclass
from typing import Iterable, List

from ..utils.config import PANES


@dataclass
class PaneVisibility:
    """Per-pane open/closed flags"""
    body: bool = False
    html: bool = False
    headers: bool = False
    senders: bool = False
    recipients: bool = False

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "PaneVisibility":
        """Build a state with exactly the named panes open."""
        state = cls()
        for name in names:
            state.set(name, True)
        return state

    def show_all(self) -> None:
        """Open every pane ("Bring all to front")"""
        for pane in PANES:
            setattr(self, pane, True)

    def hide_all(self) -> None:
        for pane in PANES:
            setattr(self, pane, False)

    def set(self, pane: str, visible: bool) -> None:
        self._check(pane)
        setattr(self, pane, visible)

    def toggle(self, pane: str) -> bool:
        """
        Flip one pane

        Args:
            pane: One of PANES

        Returns:
            The new visibility of the pane

        Raises:
            ValueError: If the pane name is unknown
        """
        self._check(pane)
        visible = not getattr(self, pane)
        setattr(self, pane, visible)
        return visible

    def visible_panes(self) -> List[str]:
        return [pane for pane in PANES if getattr(self, pane)]

    @staticmethod
    def _check(pane: str) -> None:
        if pane not in PANES:
            raise ValueError(f"Unknown pane: {pane!r}")

