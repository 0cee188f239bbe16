from __future__ import annotations

"""browser_controller.py

Wires a host document to the navigation and overlay controllers.  This is
the one object a front-end needs: it owns the models built from the options,
and republishes every state change as a single :class:`BrowserView`.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from PySide6.QtCore import QObject, Signal, Slot

from ..models.browser_options import DEFAULT_OPTIONS, BrowserOptions
from ..models.navigation_state import NavigationUIState
from ..models.overlay_state import OverlayState
from ..models.placement import Placement, bar_placement, overlay_placement
from ..models.search_index import SearchIndex
from ..models.toc import TableOfContents
from .navigation_controller import NavigationController
from .overlay_controller import OverlayController
from .page_state import PageHost, PageStateAdapter

__all__ = ["BrowserController", "BrowserView"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowserView:
    """Everything a renderer needs to draw the bar and the overlay."""

    navigation: NavigationUIState
    overlay: OverlayState
    bar: Placement
    panel: Placement


class BrowserController(QObject):
    """Page bar + overlay for one host document.

    Parameters
    ----------
    host
        Object implementing :class:`PageHost`.
    options
        Base options; ``None`` uses :data:`DEFAULT_OPTIONS`.
    width, height
        Document size in host units, used for surface placement.
    overrides
        Option keys applied on top of *options*.
    """

    viewChanged: Signal = Signal(object)  # BrowserView

    def __init__(
        self,
        host: PageHost,
        options: Optional[BrowserOptions | Mapping[str, Any]] = None,
        width: float = 1.0,
        height: float = 1.0,
        parent: QObject | None = None,
        **overrides: Any,
    ) -> None:
        super().__init__(parent)
        if options is None:
            options = DEFAULT_OPTIONS
        elif not isinstance(options, BrowserOptions):
            options = DEFAULT_OPTIONS.merged(options)
        if overrides:
            options = options.merged(overrides)
        self._options: BrowserOptions = options

        self.toc = TableOfContents(options.toc)
        self.index = SearchIndex(options.index)

        self.page_state = PageStateAdapter(host, self)
        self.navigation = NavigationController(self.page_state, self.toc.chapters, self)
        self.overlay = OverlayController(
            self.navigation,
            self.toc,
            self.index,
            search_on_enter=options.search_on_enter,
            parent=self,
        )

        self._bar = bar_placement(options, width, height)
        self._panel = overlay_placement(options, width, height)

        self.navigation.stateChanged.connect(self._on_state_changed)
        self.overlay.stateChanged.connect(self._on_state_changed)

        logger.info(
            "Browser ready: %d pages, %d chapters, %d index keys",
            self.page_state.page_count(),
            len(self.toc.chapters),
            len(self.index),
        )

    # ------------------------------------------------------------------
    @property
    def options(self) -> BrowserOptions:
        return self._options

    def view(self) -> BrowserView:
        return BrowserView(
            navigation=self.navigation.state,
            overlay=self.overlay.state,
            bar=self._bar,
            panel=self._panel,
        )

    def refresh(self) -> BrowserView:
        """Re-derive everything and publish it (e.g. after a renderer attaches)."""
        view = self.view()
        self.viewChanged.emit(view)
        return view

    # ------------------------------------------------------------------
    @Slot(object)
    def _on_state_changed(self, _state: object) -> None:
        self.viewChanged.emit(self.view())
