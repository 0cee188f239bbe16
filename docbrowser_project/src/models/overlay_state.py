from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .search_index import SearchResult

__all__ = ["OverlayMode", "OverlayState", "TOC_PANE", "SEARCH_PANE"]

TOC_PANE = 0
SEARCH_PANE = 1


class OverlayMode(Enum):
    """Which overlay pane, if any, currently covers the document."""

    NONE = "none"
    TOC = "toc"
    SEARCH = "search"


@dataclass(frozen=True)
class OverlayState:
    """Snapshot of the overlay published after every transition or search run."""

    mode: OverlayMode
    search_text: str
    results: tuple[SearchResult, ...]
    toc_available: bool
    search_available: bool

    @property
    def visible(self) -> bool:
        return self.mode is not OverlayMode.NONE

    @property
    def active_pane(self) -> int:
        # Closing resets the switcher to the TOC pane.
        return SEARCH_PANE if self.mode is OverlayMode.SEARCH else TOC_PANE
