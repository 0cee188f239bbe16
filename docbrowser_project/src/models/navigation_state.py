from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

__all__ = ["NavigationUIState", "clamp_page", "derive_navigation_state"]


def clamp_page(page: int, page_count: int) -> int:
    """Constrain *page* into ``[0, page_count - 1]`` (``0`` for an empty document)."""
    limit = page_count - 1
    return max(min(page, limit), 0)


@dataclass(frozen=True)
class NavigationUIState:
    """Everything the page bar displays, derived from the current page.

    Instances are never patched.  A new one is produced by
    :func:`derive_navigation_state` on every page change so the flags can
    not drift from what is actually navigable.
    """

    page_index: int
    page_count: int
    page_text: str

    first: bool
    previous_chapter: bool
    previous_page: bool
    next_page: bool
    next_chapter: bool
    last: bool

    # False while an overlay owns the screen.
    controls_enabled: bool = True

    # -----------------------------------------------------------------
    @property
    def page_number(self) -> int:
        """1-based page shown to the user."""
        return self.page_index + 1


def derive_navigation_state(
    page: int,
    page_count: int,
    chapters: Sequence[int],
    *,
    controls_enabled: bool = True,
) -> NavigationUIState:
    """Compute the bar state for 0-based *page* from scratch.

    Chapter pages are 1-based.  ``page + 1 > chapters[0]`` means the reader is
    past the start of the first chapter, so there is a chapter start behind
    them; ``page + 1 < chapters[-1]`` means the last chapter has not begun yet.
    """
    page = clamp_page(page, page_count)
    limit = page_count - 1

    if chapters and page_count > 0:
        prev_chapter = page + 1 > chapters[0]
        next_chapter = page + 1 < chapters[-1]
    else:
        prev_chapter = next_chapter = False

    return NavigationUIState(
        page_index=page,
        page_count=page_count,
        page_text=str(page + 1),
        first=page > 0,
        previous_chapter=prev_chapter,
        previous_page=page > 0,
        next_page=page < limit,
        next_chapter=next_chapter,
        last=page < limit,
        controls_enabled=controls_enabled,
    )
