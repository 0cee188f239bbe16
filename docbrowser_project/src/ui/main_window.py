#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Main window of the document browser.

Hosts the page view, the navigation bar (above or below the page depending
on the options) and the TOC/search overlay stacked on top of the page.  A
new :class:`BrowserController` is built for every opened PDF.
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QFileDialog,
    QMainWindow,
    QMessageBox,
    QStackedLayout,
    QVBoxLayout,
    QWidget,
)

from ..controllers.browser_controller import BrowserController
from ..models.pdf_document import DocumentLoadError, PdfDocument
from ..services.pdf_service import PdfService
from ..services.settings_service import SettingsService
from .page_view import PageView
from .widgets.navigation_bar import NavigationBar
from .widgets.overlay_panel import OverlayPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Top-level window: menus, page area, page bar and overlay."""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setWindowTitle("Document Browser")
        self.resize(900, 1000)

        self.settings = SettingsService()
        self.pdf_service = PdfService()
        self.browser: Optional[BrowserController] = None
        self.nav_bar: Optional[NavigationBar] = None
        self.overlay_panel: Optional[OverlayPanel] = None

        # --- Central layout: [bar] page+overlay [bar] ---
        central = QWidget(self)
        self._column = QVBoxLayout(central)
        self._column.setContentsMargins(0, 0, 0, 0)
        self._column.setSpacing(0)

        self._page_area = QWidget(central)
        self._page_stack = QStackedLayout(self._page_area)
        # Overlay sits above the page instead of replacing it.
        self._page_stack.setStackingMode(QStackedLayout.StackingMode.StackAll)
        self.page_view = PageView(self.pdf_service, zoom=self.settings.page_zoom(), parent=self._page_area)
        self._page_stack.addWidget(self.page_view)
        self._column.addWidget(self._page_area, 1)
        self.setCentralWidget(central)

        self._create_actions()
        self._create_menus()
        self._update_actions()
        self.statusBar().showMessage("Ready", 3000)
        logger.debug("MainWindow initialized.")

    # ------------------------------------------------------------------
    # Actions / menus
    # ------------------------------------------------------------------
    def _create_actions(self) -> None:
        self.open_action = QAction("&Open PDF…", self)
        self.open_action.setShortcut(QKeySequence.StandardKey.Open)
        self.open_action.setStatusTip("Open a PDF document.")
        self.open_action.triggered.connect(self.on_open_pdf)

        self.close_action = QAction("&Close", self)
        self.close_action.setShortcut(QKeySequence.StandardKey.Close)
        self.close_action.triggered.connect(self.close_document)

        self.quit_action = QAction("&Quit", self)
        self.quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        self.quit_action.triggered.connect(self.close)

        self.first_page_action = QAction("&First Page", self)
        self.first_page_action.setShortcut(QKeySequence(Qt.Key.Key_Home))
        self.first_page_action.triggered.connect(lambda: self.browser and self.browser.navigation.first())

        self.prev_page_action = QAction("&Previous Page", self)
        self.prev_page_action.setShortcut(QKeySequence(Qt.Key.Key_PageUp))
        self.prev_page_action.triggered.connect(lambda: self.browser and self.browser.navigation.previous_page())

        self.next_page_action = QAction("&Next Page", self)
        self.next_page_action.setShortcut(QKeySequence(Qt.Key.Key_PageDown))
        self.next_page_action.triggered.connect(lambda: self.browser and self.browser.navigation.next_page())

        self.last_page_action = QAction("&Last Page", self)
        self.last_page_action.setShortcut(QKeySequence(Qt.Key.Key_End))
        self.last_page_action.triggered.connect(lambda: self.browser and self.browser.navigation.last())

        self.toc_action = QAction("&Table of Contents", self)
        self.toc_action.setShortcut(QKeySequence("Ctrl+T"))
        self.toc_action.triggered.connect(lambda: self.browser and self.browser.overlay.toggle_toc())

        self.search_action = QAction("&Search Index", self)
        self.search_action.setShortcut(QKeySequence.StandardKey.Find)
        self.search_action.triggered.connect(lambda: self.browser and self.browser.overlay.toggle_search())

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(self.open_action)
        file_menu.addAction(self.close_action)
        file_menu.addSeparator()
        file_menu.addAction(self.quit_action)

        go_menu = self.menuBar().addMenu("&Go")
        go_menu.addAction(self.first_page_action)
        go_menu.addAction(self.prev_page_action)
        go_menu.addAction(self.next_page_action)
        go_menu.addAction(self.last_page_action)
        go_menu.addSeparator()
        go_menu.addAction(self.toc_action)
        go_menu.addAction(self.search_action)

    def _update_actions(self) -> None:
        """Enable page actions from the controller's derived state."""
        if self.browser is None:
            for act in (
                self.close_action,
                self.first_page_action,
                self.prev_page_action,
                self.next_page_action,
                self.last_page_action,
                self.toc_action,
                self.search_action,
            ):
                act.setEnabled(False)
            return

        view = self.browser.view()
        nav, overlay = view.navigation, view.overlay
        self.close_action.setEnabled(True)
        self.first_page_action.setEnabled(nav.controls_enabled and nav.first)
        self.prev_page_action.setEnabled(nav.controls_enabled and nav.previous_page)
        self.next_page_action.setEnabled(nav.controls_enabled and nav.next_page)
        self.last_page_action.setEnabled(nav.controls_enabled and nav.last)
        self.toc_action.setEnabled(overlay.toc_available)
        self.search_action.setEnabled(overlay.search_available)

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------
    def on_open_pdf(self) -> None:
        """Ask for a PDF and open it."""
        filename, _ = QFileDialog.getOpenFileName(
            self,
            "Open PDF",
            self.settings.last_open_dir(),
            "PDF Files (*.pdf);;All Files (*)",
        )
        if not filename:
            logger.info("Open PDF cancelled by user.")
            return
        self.settings.set_last_open_dir(Path(filename).parent)
        self.open_pdf(filename)

    def open_pdf(self, path: str | Path) -> bool:
        """Open *path* and attach a fresh browser to it.

        Load failures are reported in a message box; the previous document
        stays open in that case.
        """
        path = Path(path)
        self.statusBar().showMessage(f"Loading '{path.name}'…", 0)
        try:
            document = self.pdf_service.load_pdf(path, base=self.settings.browser_defaults())
        except (FileNotFoundError, DocumentLoadError) as e:
            logger.error("Failed to open %s: %s", path, e)
            QMessageBox.critical(self, "PDF Load Error", f"Failed to open PDF:\n{e}")
            self.statusBar().showMessage("Failed to open PDF.", 5000)
            return False

        self._attach_document(document)
        self.setWindowTitle(f"{path.name} – Document Browser")
        self.statusBar().showMessage(f"Opened '{path.name}' ({document.get_page_count()} pages).", 5000)
        return True

    def close_document(self) -> None:
        self._detach_browser()
        self.page_view.set_document(None)
        self.pdf_service.close()
        self.setWindowTitle("Document Browser")
        self._update_actions()

    def _attach_document(self, document: PdfDocument) -> None:
        self._detach_browser()

        self.browser = BrowserController(document, self.pdf_service.options, parent=self)
        view = self.browser.view()

        self.nav_bar = NavigationBar(self.browser, icon_size=self.settings.icon_size(), parent=self)
        # anchor_y == 1 anchors the bar to the top edge.
        if view.bar.anchor_y >= 1.0:
            self._column.insertWidget(0, self.nav_bar)
        else:
            self._column.addWidget(self.nav_bar)

        self.overlay_panel = OverlayPanel(self.browser, parent=self._page_area)
        self._page_stack.addWidget(self.overlay_panel)
        self._page_stack.setCurrentWidget(self.overlay_panel)
        self.overlay_panel.apply_view(view)

        self.browser.viewChanged.connect(lambda _view: self._update_actions())
        self.page_view.set_document(document)
        self._update_actions()

    def _detach_browser(self) -> None:
        if self.nav_bar is not None:
            self._column.removeWidget(self.nav_bar)
            self.nav_bar.deleteLater()
            self.nav_bar = None
        if self.overlay_panel is not None:
            self._page_stack.removeWidget(self.overlay_panel)
            self.overlay_panel.deleteLater()
            self.overlay_panel = None
        if self.browser is not None:
            self.browser.deleteLater()
            self.browser = None

    # ------------------------------------------------------------------
    def closeEvent(self, event) -> None:  # noqa: N802
        self.pdf_service.close()
        logger.info("MainWindow closed.")
        super().closeEvent(event)
