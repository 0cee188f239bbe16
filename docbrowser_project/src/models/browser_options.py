from __future__ import annotations

"""Configuration accepted by :class:`BrowserController`.

Options are validated once with pydantic and frozen afterwards.  The original
camelCase spellings (``zOffset``, ``searchOnEnter``) are accepted as aliases
so option files written for other front-ends load unchanged.
"""

from typing import Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

from .toc import TocEntry

__all__ = ["BrowserOptions", "DEFAULT_OPTIONS"]


class BrowserOptions(BaseModel):
    """Bar placement, search behaviour, outline and keyword index."""

    position: Literal["top", "bottom"] = "bottom"
    z_offset: float = Field(0.3, alias="zOffset")
    search_on_enter: bool = Field(False, alias="searchOnEnter")
    toc: list[TocEntry] = Field(default_factory=list)
    index: dict[str, Union[int, list[int]]] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # ------------------------------------------------------------------
    def merged(self, overrides: Mapping[str, Any] | None = None, **kwargs: Any) -> BrowserOptions:
        """Return a copy with *overrides* applied on top (validated again).

        Keys may use either the field names or their aliases.
        """
        data = self.model_dump()
        for key, value in {**(overrides or {}), **kwargs}.items():
            data[_FIELD_FOR_ALIAS.get(key, key)] = value
        return BrowserOptions.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the JSON sidecar layout."""
        return self.model_dump(mode="json")


_FIELD_FOR_ALIAS = {
    field.alias: name
    for name, field in BrowserOptions.model_fields.items()
    if field.alias
}

DEFAULT_OPTIONS = BrowserOptions()
