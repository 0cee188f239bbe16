from __future__ import annotations

"""page_state.py

Adapter between the browser controllers and the host document that owns the
current page.  Every page request is clamped into range before it reaches the
host, and every host change – whoever caused it – is re-emitted as
:pyattr:`PageStateAdapter.pageChanged`.  Controllers subscribe here once and
never keep their own copy of the page.
"""

import logging
from typing import Callable, Protocol

from PySide6.QtCore import QObject, Signal, Slot

from ..models.navigation_state import clamp_page

__all__ = ["PageHost", "PageStateAdapter"]

logger = logging.getLogger(__name__)


class PageHost(Protocol):
    """What the browser needs from the object that owns the page state."""

    def get_page_count(self) -> int: ...

    def get_current_page(self) -> int: ...

    def set_current_page(self, page: int) -> None: ...

    def subscribe(self, callback: Callable[[int, int], None]) -> None: ...


class PageStateAdapter(QObject):
    """Clamping write-through wrapper around a :class:`PageHost`."""

    pageChanged: Signal = Signal(int, int)  # (new_page, old_page), 0-based

    def __init__(self, host: PageHost, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._host = host
        host.subscribe(self._on_host_changed)

    # ------------------------------------------------------------------
    # Reads always go to the host
    # ------------------------------------------------------------------
    def page_count(self) -> int:
        return self._host.get_page_count()

    def current_page(self) -> int:
        return self._host.get_current_page()

    # ------------------------------------------------------------------
    def go_to_page(self, requested: int) -> None:
        """Ask the host to show 0-based *requested*, clamped into range."""
        count = self._host.get_page_count()
        if count < 1:
            logger.debug("Ignoring page request %d: document has no pages", requested)
            return
        page = clamp_page(int(requested), count)
        if page != requested:
            logger.debug("Clamped page request %d -> %d", requested, page)
        self._host.set_current_page(page)

    def on_page_changed(self, callback: Callable[[int, int], None]) -> None:
        """Call *callback(new_page, old_page)* for every host page change."""
        self.pageChanged.connect(callback)

    # ------------------------------------------------------------------
    @Slot(int, int)
    def _on_host_changed(self, new_page: int, old_page: int) -> None:
        self.pageChanged.emit(new_page, old_page)
