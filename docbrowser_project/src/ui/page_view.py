from __future__ import annotations

"""Scrollable view of the current PDF page.

Page images come from :class:`PdfService`; the view asks for a new one
whenever the document reports a page change.
"""

import logging
from typing import Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QLabel, QScrollArea, QWidget

from ..models.pdf_document import PdfDocument
from ..services.pdf_service import PdfService

__all__ = ["PageView"]

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "Open a PDF to start browsing (Ctrl+O)"


class PageView(QScrollArea):
    """Shows one rendered page at the configured zoom."""

    def __init__(self, service: PdfService, zoom: float = 1.5, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("PageView")
        self._service = service
        self._zoom = zoom
        self._document: Optional[PdfDocument] = None

        self._label = QLabel(PLACEHOLDER_TEXT, self)
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setWidget(self._label)
        self.setWidgetResizable(True)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)

        service.pageImageReady.connect(self._on_page_image)

    # ------------------------------------------------------------------
    def set_document(self, document: Optional[PdfDocument]) -> None:
        """Follow *document*'s page changes (``None`` shows the placeholder)."""
        if self._document is not None:
            try:
                self._document.stateChanged.disconnect(self._on_state_changed)
            except (RuntimeError, TypeError):  # pragma: no cover – already gone
                pass
        self._document = document
        if document is None or not document.is_loaded:
            self._label.setPixmap(QPixmap())
            self._label.setText(PLACEHOLDER_TEXT)
            return
        document.stateChanged.connect(self._on_state_changed)
        self._service.request_page(document.get_current_page(), self._zoom)

    @property
    def zoom(self) -> float:
        return self._zoom

    def set_zoom(self, zoom: float) -> None:
        self._zoom = zoom
        if self._document is not None and self._document.is_loaded:
            self._service.request_page(self._document.get_current_page(), zoom)

    # ------------------------------------------------------------------
    @Slot(int, int)
    def _on_state_changed(self, new_page: int, _old_page: int) -> None:
        self._service.request_page(new_page, self._zoom)

    @Slot(int, QPixmap)
    def _on_page_image(self, page: int, pixmap: QPixmap) -> None:
        # Stale renders (another page became current meanwhile) are dropped.
        if self._document is None or page != self._document.get_current_page():
            return
        self._label.setText("")
        self._label.setPixmap(pixmap)
