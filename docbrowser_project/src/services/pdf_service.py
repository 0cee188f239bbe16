from __future__ import annotations

"""docbrowser_project.services.pdf_service

Singleton‑style service that owns the currently opened :class:`PdfDocument`,
resolves its browser options and caches rendered pages, announcing both
through Qt signals for UI binding.
"""

import logging
from collections import OrderedDict
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QPixmap

from ..models.browser_options import DEFAULT_OPTIONS, BrowserOptions
from ..models.pdf_document import PdfDocument
from ..models.serializers import options_for_pdf

__all__ = ["PdfService"]

logger = logging.getLogger(__name__)

# Full-page pixmaps are large; keep only the most recently shown ones.
PAGE_CACHE_SIZE = 6


class PdfService(QObject):
    """Qt object emitting signals when a PDF or one of its pages is ready."""

    # Signals -----------------------------------------------------------------------------------
    documentLoaded: Signal = Signal(int)        # page_count
    pageImageReady: Signal = Signal(int, QPixmap)  # (page, pixmap)

    # -----------------------------------------------------------------------------------------
    # Construction / singleton helper
    # -----------------------------------------------------------------------------------------
    _instance: Optional[PdfService] = None

    def __new__(cls) -> PdfService:  # ensure singleton
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        # Guard against double‑init when singleton is requested multiple times.
        if getattr(self, "_initialized", False):  # type: ignore[attr-defined]
            return
        super().__init__()
        self._current: Optional[PdfDocument] = None
        self._options: BrowserOptions = DEFAULT_OPTIONS
        # LRU keyed by (page, zoom), oldest first
        self._page_cache: OrderedDict[tuple[int, float], QPixmap] = OrderedDict()
        self._initialized = True  # type: ignore[attr-defined]

    # -----------------------------------------------------------------------------------------
    # Public API
    # -----------------------------------------------------------------------------------------
    @property
    def current(self) -> Optional[PdfDocument]:
        return self._current

    @property
    def options(self) -> BrowserOptions:
        """Options resolved for the current document."""
        return self._options

    def load_pdf(self, path: str | Path, base: BrowserOptions = DEFAULT_OPTIONS) -> PdfDocument:
        """Open *path*, resolve its options and emit :pyattr:`documentLoaded`.

        The option sidecar next to the PDF is merged over *base*; the PDF's own
        bookmarks fill in the TOC when no option source provides one.  On
        success the page cache is cleared and the previous document closed.

        Raises
        ------
        FileNotFoundError, DocumentLoadError
            Propagated from :meth:`PdfDocument.load`; the current document is
            left untouched.
        """
        pdf = PdfDocument()
        pdf.load(path)

        previous, self._current = self._current, pdf
        if previous is not None:
            previous.close()
        self._page_cache.clear()
        self._options = options_for_pdf(path, base, outline=pdf.outline())
        logger.info(
            "Loaded %s: %d pages, %d TOC entries, %d index keys",
            path, pdf.get_page_count(), len(self._options.toc), len(self._options.index),
        )

        self.documentLoaded.emit(pdf.get_page_count())
        return pdf

    def request_page(self, page: int, zoom: float = 1.5) -> None:
        """Ensure *page* is rendered at *zoom* and emit :pyattr:`pageImageReady`.

        Rendering happens synchronously in the calling thread.  Requests
        without a loaded document are ignored.
        """
        if self._current is None:
            return

        cache_key = (page, zoom)
        if cache_key in self._page_cache:
            self._page_cache.move_to_end(cache_key)
            self.pageImageReady.emit(page, self._page_cache[cache_key])
            return

        pix = QPixmap.fromImage(self._current.render_page(page, zoom))
        self._page_cache[cache_key] = pix
        while len(self._page_cache) > PAGE_CACHE_SIZE:
            self._page_cache.popitem(last=False)
        self.pageImageReady.emit(page, pix)

    def close(self) -> None:
        """Close the current document and drop cached pages."""
        if self._current is not None:
            self._current.close()
        self._current = None
        self._options = DEFAULT_OPTIONS
        self._page_cache.clear()
