from __future__ import annotations

"""docbrowser_project.models.pdf_document

PDF-backed host document built on PyMuPDF (``fitz``).

Besides the page-state protocol inherited from
:class:`~docbrowser_project.src.models.multistate_document.MultiStateDocument`
the class renders pages to :class:`QImage` and exposes the PDF's bookmark
outline as a :class:`TocEntry` tree.  All calls are synchronous.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Sequence

import fitz  # PyMuPDF
from PySide6.QtCore import QObject
from PySide6.QtGui import QImage

from .multistate_document import MultiStateDocument
from .toc import TocEntry

__all__ = ["PdfDocument", "DocumentLoadError", "outline_to_toc"]

logger = logging.getLogger(__name__)


class DocumentLoadError(Exception):
    """Raised when a PDF cannot be opened or parsed."""


def outline_to_toc(rows: Sequence[Sequence[Any]]) -> list[TocEntry]:
    """Convert PyMuPDF ``get_toc()`` rows into a :class:`TocEntry` tree.

    Each row is ``[level, title, page]`` with 1-based level and page.  A row
    whose level skips ahead is attached to the deepest open ancestor.  Rows
    without a resolvable page (``page < 1``) are dropped.
    """
    root: list[dict[str, Any]] = []
    stack: list[tuple[int, list[dict[str, Any]]]] = [(0, root)]
    for row in rows:
        level, title, page = int(row[0]), str(row[1]), int(row[2])
        if page < 1:
            logger.debug("Skipping outline item %r without a target page", title)
            continue
        while stack[-1][0] >= level:
            stack.pop()
        node: dict[str, Any] = {"name": title, "page": page, "items": []}
        stack[-1][1].append(node)
        stack.append((level, node["items"]))
    return [TocEntry.model_validate(node) for node in root]


class PdfDocument(MultiStateDocument):
    """A loaded PDF whose pages are the document states."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(page_count=0, parent=parent)
        self._doc: Optional[fitz.Document] = None
        self._path: Optional[Path] = None

    # ---------------------------------------------------------------------
    # Loading
    # ---------------------------------------------------------------------
    def load(self, path: str | Path) -> None:
        """Open *path* and reset to the first page.

        Raises
        ------
        FileNotFoundError
            If *path* does not exist.
        DocumentLoadError
            If the file is not a readable PDF or has no pages.
        """
        pdf_path = Path(path)
        if not pdf_path.is_file():
            raise FileNotFoundError(f"PDF file not found: {pdf_path}")

        self.close()
        try:
            doc = fitz.open(str(pdf_path))
        except Exception as exc:
            logger.error("Failed to open PDF '%s': %s", pdf_path, exc, exc_info=True)
            raise DocumentLoadError(f"Failed to open PDF: {exc}") from exc

        if doc.page_count < 1:
            doc.close()
            raise DocumentLoadError(f"PDF has no pages: {pdf_path}")

        self._doc = doc
        self._path = pdf_path
        self._set_page_count(doc.page_count)
        logger.info("Opened %s (%d pages)", pdf_path, doc.page_count)

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def is_loaded(self) -> bool:
        return self._doc is not None

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------
    def outline(self) -> list[TocEntry]:
        """Bookmark outline as a TOC tree (empty when the PDF has none)."""
        if self._doc is None:
            return []
        return outline_to_toc(self._doc.get_toc(simple=True))

    def render_page(self, page: int, zoom: float = 1.5) -> QImage:
        """Render 0-based *page* scaled by *zoom* (1.0 = 72 dpi).

        Raises
        ------
        RuntimeError
            If no document is loaded.
        ValueError
            If *page* is out of range or *zoom* is not positive.
        """
        if self._doc is None:
            raise RuntimeError("PDF not loaded – call `load()` first.")
        if not 0 <= page < self.get_page_count():
            raise ValueError(f"Page index {page} out of range (0-{self.get_page_count() - 1}).")
        if zoom <= 0:
            raise ValueError("Zoom must be positive.")

        pix = self._doc[page].get_pixmap(matrix=fitz.Matrix(zoom, zoom), alpha=False)
        image = QImage(pix.samples, pix.width, pix.height, pix.stride, QImage.Format.Format_RGB888)
        # pix.samples is released with the pixmap.
        return image.copy()

    # ------------------------------------------------------------------
    def close(self) -> None:
        if self._doc is not None:
            logger.debug("Closing %s", self._path)
            self._doc.close()
        self._doc = None
        self._path = None
        self._set_page_count(0)
