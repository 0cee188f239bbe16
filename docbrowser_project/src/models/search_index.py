from __future__ import annotations

"""Static keyword index for the search overlay.

The index is supplied pre-built (``{"keyword": page}`` or
``{"keyword": [page, page, ...]}``, pages 1-based) and only ever filtered.
"""

from dataclasses import dataclass
from typing import Mapping, Sequence, Union

__all__ = ["SearchIndex", "SearchResult"]

PageRef = Union[int, Sequence[int]]


@dataclass(frozen=True)
class SearchResult:
    """A matched key and every page it points at."""

    key: str
    pages: tuple[int, ...]


class SearchIndex:
    """Case-insensitive substring lookup over a fixed key → pages mapping."""

    def __init__(self, mapping: Mapping[str, PageRef] | None = None) -> None:
        # Copy once so later edits to the caller's dict cannot leak in.
        self._entries: dict[str, tuple[int, ...]] = {
            key: self._as_pages(value) for key, value in (mapping or {}).items()
        }

    @staticmethod
    def _as_pages(value: PageRef) -> tuple[int, ...]:
        if isinstance(value, int):
            return (value,)
        return tuple(value)

    # ------------------------------------------------------------------
    def query(self, text: str) -> list[SearchResult]:
        """Return every key containing *text*, ignoring case, in index order.

        An empty *text* matches every key.
        """
        needle = text.lower()
        return [
            SearchResult(key, pages)
            for key, pages in self._entries.items()
            if needle in key.lower()
        ]

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)
