from __future__ import annotations

"""Where the page bar and the overlay panel sit relative to the document.

Coordinates are in the host's units with the document centre at the origin:
``x`` runs along the document's height axis, ``z`` lifts the surface off the
page so it does not z-fight with the rendered content.
"""

from dataclasses import dataclass

from .browser_options import BrowserOptions

__all__ = ["Placement", "bar_placement", "overlay_placement"]

UI_SCALE = 0.25
# Overlay pixels per document unit (the panel is authored at 4x then scaled down).
OVERLAY_PX_PER_UNIT = 40
OVERLAY_PADDING = 10


@dataclass(frozen=True)
class Placement:
    anchor_x: float
    anchor_y: float
    x: float
    y: float
    z: float
    scale: float = UI_SCALE
    width: float | None = None
    height: float | None = None
    padding: int = 0


def bar_placement(options: BrowserOptions, width: float, height: float) -> Placement:
    """Page bar hugging the top or bottom edge, growing away from the page."""
    bottom = options.position == "bottom"
    return Placement(
        anchor_x=0.5,
        anchor_y=0.0 if bottom else 1.0,
        x=(height / 2) * (-1 if bottom else 1),
        y=0.0,
        z=options.z_offset,
    )


def overlay_placement(options: BrowserOptions, width: float, height: float) -> Placement:
    """Overlay panel centred on the page and covering it."""
    return Placement(
        anchor_x=0.5,
        anchor_y=0.5,
        x=0.0,
        y=0.0,
        z=options.z_offset,
        width=width * OVERLAY_PX_PER_UNIT,
        height=height * OVERLAY_PX_PER_UNIT,
        padding=OVERLAY_PADDING,
    )
