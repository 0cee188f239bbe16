from __future__ import annotations

"""Overlay panel with two mutually exclusive panes.

Pane 0 lists the table of contents as a tree, pane 1 is the search browser
(query field plus one row per matching key, each with a button per page).
Visibility and the active pane follow the controller's
:class:`OverlayState`.
"""

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QStackedWidget,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)

from ...controllers.browser_controller import BrowserController, BrowserView
from ...models.search_index import SearchResult
from ...models.toc import TableOfContents
from .navigation_bar import ICON_SEARCH, make_icon_button

__all__ = ["OverlayPanel"]

logger = logging.getLogger(__name__)

ICON_CLOSE = ("window-close", "✕", "Close")
PAGE_ROLE = Qt.ItemDataRole.UserRole + 1


class _ResultRow(QWidget):
    """Composite widget for one search hit: key label plus ``p.N`` buttons."""

    def __init__(self, result: SearchResult, on_page, *, parent: QWidget | None = None):
        super().__init__(parent)
        self.result = result

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 0, 4, 0)
        layout.setSpacing(6)
        layout.addWidget(QLabel(result.key, self), 1)

        self.page_buttons: list[QPushButton] = []
        for page in result.pages:
            btn = QPushButton(f"p.{page}", self)
            btn.setFlat(True)
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            btn.clicked.connect(lambda _checked=False, p=page: on_page(p))
            layout.addWidget(btn)
            self.page_buttons.append(btn)


def _header(title: str, on_close, parent: QWidget) -> QWidget:
    bar = QFrame(parent)
    bar.setObjectName("OverlayHeader")
    layout = QHBoxLayout(bar)
    layout.setContentsMargins(6, 2, 6, 2)
    label = QLabel(f"<b>{title}</b>", bar)
    label.setAlignment(Qt.AlignmentFlag.AlignCenter)
    layout.addWidget(label, 1)
    close_btn = make_icon_button(ICON_CLOSE, 16, bar)
    close_btn.clicked.connect(on_close)
    layout.addWidget(close_btn)
    bar.close_btn = close_btn  # type: ignore[attr-defined]
    return bar


class OverlayPanel(QFrame):
    """TOC / search overlay bound to a :class:`BrowserController`."""

    def __init__(self, browser: BrowserController, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("OverlayPanel")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setAutoFillBackground(True)
        self._browser = browser
        overlay = browser.overlay
        self._shown_results: tuple[SearchResult, ...] | None = None

        padding = int(browser.view().panel.padding)
        outer = QVBoxLayout(self)
        outer.setContentsMargins(padding, padding, padding, padding)

        self.stack = QStackedWidget(self)
        outer.addWidget(self.stack)

        # TOC pane -----------------------------------------------------
        toc_pane = QWidget(self.stack)
        toc_layout = QVBoxLayout(toc_pane)
        toc_layout.setContentsMargins(0, 0, 0, 0)
        self.toc_header = _header("Table of Contents", overlay.close, toc_pane)
        toc_layout.addWidget(self.toc_header)
        self.toc_tree = QTreeWidget(toc_pane)
        self.toc_tree.setHeaderHidden(True)
        self.toc_tree.setColumnCount(2)
        toc_layout.addWidget(self.toc_tree, 1)
        self._populate_toc(overlay.toc)
        self.toc_tree.itemClicked.connect(self._on_toc_item_clicked)
        self.stack.addWidget(toc_pane)

        # Search pane --------------------------------------------------
        search_pane = QWidget(self.stack)
        search_layout = QVBoxLayout(search_pane)
        search_layout.setContentsMargins(0, 0, 0, 0)
        self.search_header = _header("Search", overlay.close, search_pane)
        search_layout.addWidget(self.search_header)

        query_row = QHBoxLayout()
        query_row.setContentsMargins(8, 0, 8, 0)
        query_row.setSpacing(8)
        query_row.addWidget(make_icon_button(ICON_SEARCH, 16, search_pane))
        self.search_edit = QLineEdit(search_pane)
        self.search_edit.setPlaceholderText("Search the index…")
        query_row.addWidget(self.search_edit, 1)
        self.clear_btn = make_icon_button(ICON_CLOSE, 16, search_pane)
        self.clear_btn.setToolTip("Clear search")
        query_row.addWidget(self.clear_btn)
        search_layout.addLayout(query_row)

        self.results_list = QListWidget(search_pane)
        self.results_list.setSpacing(2)
        search_layout.addWidget(self.results_list, 1)
        self.stack.addWidget(search_pane)

        self.search_edit.textChanged.connect(overlay.search_text_changed)
        self.search_edit.returnPressed.connect(lambda: overlay.search_committed(self.search_edit.text()))
        self.clear_btn.clicked.connect(self._on_clear_clicked)

        browser.viewChanged.connect(self.apply_view)
        self.apply_view(browser.view())

    # ------------------------------------------------------------------
    def _populate_toc(self, toc: TableOfContents) -> None:
        self.toc_tree.clear()
        # parents[d] is the item that depth-d entries hang under
        parents: list = [self.toc_tree]
        for depth, entry in toc.walk():
            del parents[depth + 1:]
            item = QTreeWidgetItem(parents[depth], [entry.name, str(entry.page)])
            item.setData(0, PAGE_ROLE, entry.page)
            item.setTextAlignment(1, Qt.AlignmentFlag.AlignRight)
            parents.append(item)
        self.toc_tree.expandAll()
        self.toc_tree.resizeColumnToContents(1)

    def _on_toc_item_clicked(self, item: QTreeWidgetItem, _column: int = 0) -> None:
        page = item.data(0, PAGE_ROLE)
        if page is not None:
            self._browser.overlay.select_toc_entry(int(page))

    def _on_clear_clicked(self) -> None:
        self.search_edit.blockSignals(True)
        self.search_edit.clear()
        self.search_edit.blockSignals(False)
        self._browser.overlay.clear_search()

    # ------------------------------------------------------------------
    def _rebuild_results(self, results: tuple[SearchResult, ...]) -> None:
        self.results_list.clear()
        for result in results:
            row = _ResultRow(result, self._browser.overlay.select_search_result, parent=self.results_list)
            item = QListWidgetItem(self.results_list)
            item.setSizeHint(row.sizeHint())
            self.results_list.setItemWidget(item, row)
        self._shown_results = results

    def result_rows(self) -> list[_ResultRow]:
        """Row widgets currently listed, in display order."""
        return [
            self.results_list.itemWidget(self.results_list.item(i))
            for i in range(self.results_list.count())
        ]

    # ------------------------------------------------------------------
    def apply_view(self, view: BrowserView) -> None:
        overlay = view.overlay
        if self.search_edit.text() != overlay.search_text:
            self.search_edit.blockSignals(True)
            self.search_edit.setText(overlay.search_text)
            self.search_edit.blockSignals(False)
        # A new tuple means the query ran again; rebuild the whole list.
        if overlay.results is not self._shown_results:
            self._rebuild_results(overlay.results)
        self.stack.setCurrentIndex(overlay.active_pane)
        self.setVisible(overlay.visible)
