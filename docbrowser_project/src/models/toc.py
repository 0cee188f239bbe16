from __future__ import annotations

"""docbrowser_project.models.toc

Table-of-contents model.  The outline supplied by the caller (or extracted
from a PDF's bookmarks) may arrive in any order; it is normalised once at
setup into a page-ordered tree from which the *chapter list* (the start page
of every top-level entry) is derived.

Pages in the TOC are **1-based** (user facing) while the current page handed
to the chapter-target helpers is **0-based**, matching the host document.
"""

import logging
from typing import Any, Iterable, Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "TocEntry",
    "TableOfContents",
    "normalize_toc",
    "flatten_top_level",
    "previous_chapter_target",
    "next_chapter_target",
]

logger = logging.getLogger(__name__)


class TocEntry(BaseModel):
    """One outline node: a titled 1-based page with optional children."""

    name: str
    page: int
    items: list[TocEntry] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_validator("items", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        # Outlines written by hand frequently carry ``"items": null``.
        return [] if value is None else value


def _coerce(entry: TocEntry | Mapping[str, Any]) -> TocEntry:
    if isinstance(entry, TocEntry):
        return entry
    return TocEntry.model_validate(entry)


def normalize_toc(raw: Iterable[TocEntry | Mapping[str, Any]]) -> list[TocEntry]:
    """Return *raw* sorted by ``page`` at every depth.

    The sort is stable so entries sharing a page keep their source order.
    Running the function on its own output returns an equal tree.
    """
    entries = [_coerce(each) for each in raw]
    ordered = sorted(entries, key=lambda e: e.page)
    return [
        each.model_copy(update={"items": normalize_toc(each.items)}) if each.items else each
        for each in ordered
    ]


def flatten_top_level(entries: Iterable[TocEntry]) -> list[int]:
    """Pages of the depth-0 entries, in the order given (ascending once normalised)."""
    return [each.page for each in entries]


def previous_chapter_target(chapters: list[int], current: int) -> Optional[int]:
    """Largest 0-based chapter start strictly before *current*, or ``None``."""
    target: Optional[int] = None
    for chapter in chapters:
        start = chapter - 1
        if start < current and (target is None or start > target):
            target = start
    return target


def next_chapter_target(chapters: list[int], current: int) -> Optional[int]:
    """Smallest 0-based chapter start strictly after *current*, or ``None``."""
    target: Optional[int] = None
    for chapter in chapters:
        start = chapter - 1
        if start > current and (target is None or start < target):
            target = start
    return target


class TableOfContents:
    """Normalised outline plus the chapter list derived from it.

    Built once at controller setup and never edited afterwards.
    """

    def __init__(self, raw: Iterable[TocEntry | Mapping[str, Any]] = ()) -> None:
        self._entries: tuple[TocEntry, ...] = tuple(normalize_toc(raw))
        self._chapters: tuple[int, ...] = tuple(flatten_top_level(self._entries))
        logger.debug("TOC built: %d top-level entries", len(self._chapters))

    # ------------------------------------------------------------------
    @property
    def entries(self) -> tuple[TocEntry, ...]:
        return self._entries

    @property
    def chapters(self) -> list[int]:
        """1-based start pages of the top-level entries."""
        return list(self._chapters)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    # ------------------------------------------------------------------
    def walk(self) -> Iterator[tuple[int, TocEntry]]:
        """Yield ``(depth, entry)`` pairs in pre-order (display order)."""
        stack: list[tuple[int, TocEntry]] = [(0, e) for e in reversed(self._entries)]
        while stack:
            depth, entry = stack.pop()
            yield depth, entry
            stack.extend((depth + 1, child) for child in reversed(entry.items))
