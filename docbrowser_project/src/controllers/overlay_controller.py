from __future__ import annotations

"""overlay_controller.py

Modal overlay shared by the table-of-contents browser and the search
browser.  Only one pane can be open; while either is open the page bar is
disabled through :meth:`NavigationController.set_controls_enabled`.

Signals
-------
stateChanged(OverlayState)
    Emitted after every open/close transition and every search run.
"""

import logging

from PySide6.QtCore import QObject, Signal, Slot

from ..models.overlay_state import OverlayMode, OverlayState
from ..models.search_index import SearchIndex, SearchResult
from ..models.toc import TableOfContents
from .navigation_controller import NavigationController

__all__ = ["OverlayController"]

logger = logging.getLogger(__name__)


class OverlayController(QObject):
    """Open/close state of the overlay plus the live search result list."""

    stateChanged: Signal = Signal(object)  # OverlayState

    def __init__(
        self,
        navigation: NavigationController,
        toc: TableOfContents,
        index: SearchIndex,
        *,
        search_on_enter: bool = False,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._navigation = navigation
        self._toc = toc
        self._index = index
        self._search_on_enter = bool(search_on_enter)

        self._mode = OverlayMode.NONE
        self._search_text = ""
        # The search pane starts out listing the whole index.
        self._results: tuple[SearchResult, ...] = tuple(index.query(""))

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def mode(self) -> OverlayMode:
        return self._mode

    @property
    def toc(self) -> TableOfContents:
        return self._toc

    @property
    def toc_available(self) -> bool:
        return bool(self._toc.chapters)

    @property
    def search_available(self) -> bool:
        return not self._index.is_empty

    @property
    def search_on_enter(self) -> bool:
        return self._search_on_enter

    @property
    def state(self) -> OverlayState:
        return OverlayState(
            mode=self._mode,
            search_text=self._search_text,
            results=self._results,
            toc_available=self.toc_available,
            search_available=self.search_available,
        )

    def _publish(self) -> None:
        self.stateChanged.emit(self.state)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def _set_mode(self, mode: OverlayMode) -> None:
        logger.debug("Overlay %s -> %s", self._mode.value, mode.value)
        self._mode = mode
        self._navigation.set_controls_enabled(mode is OverlayMode.NONE)
        self._publish()

    def open_toc(self) -> None:
        self._set_mode(OverlayMode.TOC)

    def open_search(self) -> None:
        self._set_mode(OverlayMode.SEARCH)

    def close(self) -> None:
        self._set_mode(OverlayMode.NONE)

    @Slot()
    def toggle_toc(self) -> None:
        """TOC trigger button: closes the overlay if the TOC is already showing."""
        if self._mode is OverlayMode.TOC:
            self.close()
        else:
            self.open_toc()

    @Slot()
    def toggle_search(self) -> None:
        """Search trigger button: closes the overlay if search is already showing."""
        if self._mode is OverlayMode.SEARCH:
            self.close()
        else:
            self.open_search()

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def run_search(self, text: str) -> list[SearchResult]:
        """Replace the result list with the matches for *text*."""
        self._search_text = text
        self._results = tuple(self._index.query(text))
        self._publish()
        return list(self._results)

    @Slot(str)
    def search_text_changed(self, text: str) -> None:
        """Per-keystroke handler; searches live unless *search_on_enter*."""
        if self._search_on_enter:
            self._search_text = text
            return
        self.run_search(text)

    @Slot(str)
    def search_committed(self, text: str) -> None:
        """Enter-key handler; only searches when *search_on_enter*."""
        if self._search_on_enter:
            self.run_search(text)

    @Slot()
    def clear_search(self) -> None:
        """Empty the search field and list the whole index again."""
        self.run_search("")

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select_toc_entry(self, page: int) -> None:
        """Jump to the 1-based *page* of a TOC entry and close the overlay."""
        self._navigation.go_to_page(page - 1)
        self.close()

    def select_search_result(self, page: int) -> None:
        """Jump to a 1-based result *page* and close the overlay."""
        self._navigation.go_to_page(page - 1)
        self.close()
