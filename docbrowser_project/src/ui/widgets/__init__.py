"""Widgets subpackage.

Qt widgets that render a :class:`BrowserController`'s state.

Exports:
    NavigationBar: page buttons, page-number field and overlay triggers.
    OverlayPanel: TOC tree and index search panes.
"""

from __future__ import annotations

from .navigation_bar import NavigationBar
from .overlay_panel import OverlayPanel

__all__ = [
    "NavigationBar",
    "OverlayPanel",
]
