from __future__ import annotations

"""multistate_document.py

In-memory host document: a fixed number of pages (states) and a current page
that anyone may change.  Every change is announced through
:pyattr:`MultiStateDocument.stateChanged` so the browser controller stays in
sync regardless of who moved the page.
"""

import logging
from typing import Callable

from PySide6.QtCore import QObject, Signal

__all__ = ["MultiStateDocument"]

logger = logging.getLogger(__name__)


class MultiStateDocument(QObject):
    """Page-state owner implementing the host protocol used by the browser."""

    stateChanged: Signal = Signal(int, int)  # (new_page, old_page), 0-based

    def __init__(self, page_count: int = 1, current_page: int = 0, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._page_count = max(int(page_count), 0)
        if self._page_count and not 0 <= current_page < self._page_count:
            raise ValueError(f"Current page {current_page} out of range (0-{self._page_count - 1}).")
        self._current = int(current_page)

    # ------------------------------------------------------------------
    # Host protocol
    # ------------------------------------------------------------------
    def get_page_count(self) -> int:
        return self._page_count

    def get_current_page(self) -> int:
        return self._current

    def set_current_page(self, page: int) -> None:
        """Move to 0-based *page*; a no-op when it is already current.

        Raises
        ------
        ValueError
            If *page* is outside the document.
        """
        page = int(page)
        if not 0 <= page < self._page_count:
            raise ValueError(f"Page index {page} out of range (0-{self._page_count - 1}).")
        if page == self._current:
            return
        old, self._current = self._current, page
        logger.debug("Page %d -> %d", old, page)
        self.stateChanged.emit(page, old)

    def subscribe(self, callback: Callable[[int, int], None]) -> None:
        """Call *callback(new_page, old_page)* after every page change."""
        self.stateChanged.connect(callback)

    # ------------------------------------------------------------------
    def _set_page_count(self, count: int) -> None:
        """Used by subclasses that learn their size after construction."""
        self._page_count = max(int(count), 0)
        self._current = 0
