from __future__ import annotations

"""NavigationBar – page bar shown above or below the document.

Layout (left to right)::

    [first] [prev chapter] [prev] [ page no. ] [next] [next chapter] [last]   [toc] [search]

The seven page controls live in one container that is disabled while an
overlay is open.  The widget holds no state of its own: every
:class:`BrowserView` published by the controller is applied wholesale.
"""

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLineEdit,
    QSizePolicy,
    QToolButton,
    QWidget,
)

from ...controllers.browser_controller import BrowserController, BrowserView
from ...models.overlay_state import OverlayMode

__all__ = ["NavigationBar"]

logger = logging.getLogger(__name__)

# (theme icon, fallback glyph, tooltip)
ICON_FIRST = ("go-first", "⏮", "First page")
ICON_PREV_CHAPTER = ("media-seek-backward", "⏪", "Previous chapter")
ICON_PREV = ("go-previous", "◀", "Previous page")
ICON_NEXT = ("go-next", "▶", "Next page")
ICON_NEXT_CHAPTER = ("media-seek-forward", "⏩", "Next chapter")
ICON_LAST = ("go-last", "⏭", "Last page")
ICON_TOC = ("view-list-tree", "☰", "Table of contents")
ICON_SEARCH = ("edit-find", "🔍", "Search")


def make_icon_button(icon: tuple[str, str, str], size: int, parent: QWidget | None = None) -> QToolButton:
    """Tool button using the theme icon when available, the glyph otherwise."""
    theme_name, glyph, tooltip = icon
    btn = QToolButton(parent)
    btn.setAutoRaise(True)
    btn.setToolTip(tooltip)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setFixedSize(size, size)
    if QIcon.hasThemeIcon(theme_name):
        btn.setIcon(QIcon.fromTheme(theme_name))
    else:
        btn.setText(glyph)
    return btn


class NavigationBar(QWidget):
    """Buttons and page field bound to a :class:`BrowserController`."""

    def __init__(self, browser: BrowserController, icon_size: int = 32, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("NavigationBar")
        self._browser = browser
        nav = browser.navigation
        overlay = browser.overlay

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        # Page controls ------------------------------------------------
        self.page_options = QWidget(self)
        row = QHBoxLayout(self.page_options)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(4)

        self.first_btn = make_icon_button(ICON_FIRST, icon_size, self.page_options)
        self.prev_chapter_btn = make_icon_button(ICON_PREV_CHAPTER, icon_size, self.page_options)
        self.prev_btn = make_icon_button(ICON_PREV, icon_size, self.page_options)

        self.page_edit = QLineEdit(self.page_options)
        self.page_edit.setFixedWidth(64)
        self.page_edit.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.page_edit.setInputMethodHints(Qt.InputMethodHint.ImhDigitsOnly)
        self.page_edit.setToolTip("Page number – press Enter to jump")

        self.next_btn = make_icon_button(ICON_NEXT, icon_size, self.page_options)
        self.next_chapter_btn = make_icon_button(ICON_NEXT_CHAPTER, icon_size, self.page_options)
        self.last_btn = make_icon_button(ICON_LAST, icon_size, self.page_options)

        for widget in (
            self.first_btn,
            self.prev_chapter_btn,
            self.prev_btn,
            self.page_edit,
            self.next_btn,
            self.next_chapter_btn,
            self.last_btn,
        ):
            row.addWidget(widget)
        layout.addWidget(self.page_options)

        # Overlay triggers ---------------------------------------------
        self.toc_btn = make_icon_button(ICON_TOC, icon_size, self)
        self.toc_btn.setCheckable(True)
        self.search_btn = make_icon_button(ICON_SEARCH, icon_size, self)
        self.search_btn.setCheckable(True)
        layout.addWidget(self.toc_btn)
        layout.addWidget(self.search_btn)
        layout.addStretch(1)
        self.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Fixed)

        # Wiring -------------------------------------------------------
        self.first_btn.clicked.connect(nav.first)
        self.prev_chapter_btn.clicked.connect(nav.previous_chapter)
        self.prev_btn.clicked.connect(nav.previous_page)
        self.next_btn.clicked.connect(nav.next_page)
        self.next_chapter_btn.clicked.connect(nav.next_chapter)
        self.last_btn.clicked.connect(nav.last)
        self.page_edit.editingFinished.connect(self._commit_page_text)
        self.toc_btn.clicked.connect(overlay.toggle_toc)
        self.search_btn.clicked.connect(overlay.toggle_search)

        browser.viewChanged.connect(self.apply_view)
        self.apply_view(browser.view())

    # ------------------------------------------------------------------
    def _commit_page_text(self) -> None:
        self._browser.navigation.commit_page_text(self.page_edit.text())

    # ------------------------------------------------------------------
    def apply_view(self, view: BrowserView) -> None:
        """Push a controller snapshot onto the widgets."""
        nav = view.navigation
        self.page_edit.setText(nav.page_text)
        self.first_btn.setEnabled(nav.first)
        self.prev_chapter_btn.setEnabled(nav.previous_chapter)
        self.prev_btn.setEnabled(nav.previous_page)
        self.next_btn.setEnabled(nav.next_page)
        self.next_chapter_btn.setEnabled(nav.next_chapter)
        self.last_btn.setEnabled(nav.last)
        self.page_options.setEnabled(nav.controls_enabled)

        overlay = view.overlay
        self.toc_btn.setEnabled(overlay.toc_available)
        self.search_btn.setEnabled(overlay.search_available)
        self.toc_btn.setChecked(overlay.mode is OverlayMode.TOC)
        self.search_btn.setChecked(overlay.mode is OverlayMode.SEARCH)
