from __future__ import annotations

"""settings_service.py
Persisted user preferences stored as JSON in ``~/.docbrowser/settings.json``.
Access via the *singleton* :class:`SettingsService`.

The browser-related keys provide the defaults that option files and explicit
overrides are layered on (see :meth:`SettingsService.browser_defaults`).

Example
-------
>>> settings = SettingsService()
>>> settings.bar_position()
'bottom'
>>> settings.set_bar_position("top")
"""

import json
import logging
from pathlib import Path
from typing import Any

from ..models.browser_options import BrowserOptions
from ..utils.singleton import Singleton

__all__ = ["SettingsService"]

logger = logging.getLogger(__name__)


class SettingsService(Singleton):
    """Load/save user settings to *~/.docbrowser/settings.json* (singleton)."""

    _path: Path = Path.home() / ".docbrowser" / "settings.json"

    _defaults: dict[str, Any] = {
        # Page bar edge: "top" or "bottom"
        "bar_position": "bottom",
        # Lift of the bar/overlay above the page surface
        "z_offset": 0.3,
        # Search only on Enter instead of on every keystroke
        "search_on_enter": False,
        # Render scale for the page view (1.0 = 72 dpi)
        "page_zoom": 1.5,
        # Toolbar icon edge in pixels
        "icon_size": 32,
        # Directory last used in the Open dialog
        "last_open_dir": "",
    }

    # ------------------------------------------------------------------
    def __init__(self) -> None:  # noqa: D401
        # Guard – only run once due to Singleton inheritance
        if getattr(self, "_initialized", False):  # type: ignore[attr-defined]
            return

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:  # pragma: no cover – path issues
            logger.warning("Cannot create settings directory %s: %s", self._path.parent, exc)

        self._data: dict[str, Any] = {**self._defaults, **self._load()}
        self._initialized = True  # type: ignore[attr-defined]

    # ------------------------------------------------------------------
    def _load(self) -> dict[str, Any]:
        """Read JSON file if it exists; return dict or empty on failure."""
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as fp:
                data = json.load(fp)
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Failed to load settings file %s: %s", self._path, exc)
            return {}
        if not isinstance(data, dict):
            logger.error("Settings file %s does not hold a JSON object", self._path)
            return {}
        # Only keep keys we recognise – ignore unknowns
        return {k: data[k] for k in self._defaults if k in data}

    # ------------------------------------------------------------------
    def get(self, key: str, default: Any | None = None) -> Any | None:  # noqa: D401 – simple accessor
        """Return setting *key* or *default* if missing."""
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:  # noqa: D401 – simple mutator
        """Update setting value in memory. Call :pymeth:`save` to persist."""
        self._data[key] = value

    def save(self) -> None:  # noqa: D401 – straightforward persist
        """Write current settings to JSON file, creating directories as needed."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as fp:
                json.dump(self._data, fp, indent=2)
            logger.info("Settings saved to %s", self._path)
        except OSError as exc:  # pragma: no cover – disk full etc.
            logger.error("Failed to save settings to %s: %s", self._path, exc)

    def _typed(self, key: str, cast):
        """Return *key* converted by *cast*; wrongly typed values give the default."""
        value = self.get(key, self._defaults[key])
        try:
            return cast(value)
        except (TypeError, ValueError) as exc:
            logger.warning("Ignoring setting %s=%r: %s", key, value, exc)
            return cast(self._defaults[key])

    # ------------------------------------------------------------------
    # Browser defaults
    # ------------------------------------------------------------------
    def bar_position(self) -> str:
        """Return ``"top"`` or ``"bottom"``; anything else falls back to the default."""
        value = str(self.get("bar_position", self._defaults["bar_position"]))
        return value if value in ("top", "bottom") else self._defaults["bar_position"]

    def set_bar_position(self, position: str) -> None:
        assert position in ("top", "bottom"), "position must be 'top' or 'bottom'"
        self.set("bar_position", position)
        self.save()

    def z_offset(self) -> float:
        return self._typed("z_offset", float)

    def search_on_enter(self) -> bool:  # noqa: D401
        """Return whether search waits for Enter instead of running per keystroke."""
        value = self.get("search_on_enter", self._defaults["search_on_enter"])
        return value if isinstance(value, bool) else self._defaults["search_on_enter"]

    def set_search_on_enter(self, flag: bool) -> None:
        self.set("search_on_enter", bool(flag))
        self.save()

    def browser_defaults(self) -> BrowserOptions:
        """Options built from the user's preferences (no TOC, no index)."""
        return BrowserOptions(
            position=self.bar_position(),
            z_offset=self.z_offset(),
            search_on_enter=self.search_on_enter(),
        )

    # ------------------------------------------------------------------
    # Viewer preferences
    # ------------------------------------------------------------------
    def page_zoom(self) -> float:
        zoom = self._typed("page_zoom", float)
        return zoom if zoom > 0 else float(self._defaults["page_zoom"])

    def set_page_zoom(self, zoom: float) -> None:
        self.set("page_zoom", float(zoom))
        self.save()

    def icon_size(self) -> int:
        size = self._typed("icon_size", int)
        return size if size > 0 else int(self._defaults["icon_size"])

    def last_open_dir(self) -> str:
        return str(self.get("last_open_dir", self._defaults["last_open_dir"]))

    def set_last_open_dir(self, path: str | Path) -> None:
        self.set("last_open_dir", str(path))
        self.save()
