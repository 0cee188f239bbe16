from __future__ import annotations

"""navigation_controller.py

Drives page turning and chapter jumps and publishes the page bar state.

The controller keeps no page of its own.  After every page-change
notification, and after every jump it issues, the complete
:class:`NavigationUIState` is derived again from the host's current page,
the page count and the chapter list, then emitted through
:pyattr:`NavigationController.stateChanged`.  Notifications caused by the
controller's own jumps arrive through the same path as external ones.
"""

import logging
from typing import Optional, Sequence

from PySide6.QtCore import QObject, Signal, Slot

from ..models.navigation_state import NavigationUIState, derive_navigation_state
from ..models.toc import next_chapter_target, previous_chapter_target
from .page_state import PageStateAdapter

__all__ = ["NavigationController"]

logger = logging.getLogger(__name__)


class NavigationController(QObject):
    """Page bar logic: six jump buttons plus the page-number field."""

    stateChanged: Signal = Signal(object)  # NavigationUIState

    def __init__(
        self,
        page_state: PageStateAdapter,
        chapters: Sequence[int] = (),
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._pages = page_state
        # 1-based chapter start pages, ascending.
        self._chapters: tuple[int, ...] = tuple(chapters)
        self._controls_enabled = True
        page_state.on_page_changed(self._on_page_changed)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def chapters(self) -> list[int]:
        return list(self._chapters)

    @property
    def state(self) -> NavigationUIState:
        """Bar state derived from the host right now."""
        return derive_navigation_state(
            self._pages.current_page(),
            self._pages.page_count(),
            self._chapters,
            controls_enabled=self._controls_enabled,
        )

    def refresh(self) -> NavigationUIState:
        """Re-derive the bar state and publish it."""
        state = self.state
        self.stateChanged.emit(state)
        return state

    def set_controls_enabled(self, enabled: bool) -> None:
        """Enable or disable the whole page bar (used while an overlay is open)."""
        self._controls_enabled = bool(enabled)
        self.refresh()

    # ------------------------------------------------------------------
    # Jumps – all funnel through PageStateAdapter.go_to_page
    # ------------------------------------------------------------------
    def go_to_page(self, page: int) -> None:
        """Jump to 0-based *page* (clamped)."""
        self._pages.go_to_page(page)
        self.refresh()

    def first(self) -> None:
        self.go_to_page(0)

    def last(self) -> None:
        self.go_to_page(self._pages.page_count() - 1)

    def previous_page(self) -> None:
        self.go_to_page(self._pages.current_page() - 1)

    def next_page(self) -> None:
        self.go_to_page(self._pages.current_page() + 1)

    def previous_chapter(self) -> None:
        target = previous_chapter_target(list(self._chapters), self._pages.current_page())
        if target is not None:
            self.go_to_page(target)

    def next_chapter(self) -> None:
        target = next_chapter_target(list(self._chapters), self._pages.current_page())
        if target is not None:
            self.go_to_page(target)

    # ------------------------------------------------------------------
    def commit_page_text(self, text: str) -> None:
        """Handle a committed page-number entry (1-based).

        Numbers beyond the document are clamped to the first or last page.
        Text that is not an integer changes nothing; the field is reset to the
        current page by the state re-emitted below.  Commits arriving while the
        controls are disabled (the field losing focus as an overlay opens) are
        reverted the same way.
        """
        if not self._controls_enabled:
            logger.debug("Ignoring page entry %r while controls are disabled", text)
            self.refresh()
            return

        number = self._parse_page_number(text)
        if number is None:
            logger.debug("Ignoring page entry %r", text)
            self.refresh()
            return

        count = self._pages.page_count()
        if number > count:
            self.go_to_page(count - 1)
        elif number < 1:
            self.go_to_page(0)
        else:
            self.go_to_page(number - 1)

    @staticmethod
    def _parse_page_number(text: str) -> Optional[int]:
        try:
            return int(str(text).strip())
        except ValueError:
            return None

    # ------------------------------------------------------------------
    @Slot(int, int)
    def _on_page_changed(self, new_page: int, old_page: int) -> None:
        self.refresh()
