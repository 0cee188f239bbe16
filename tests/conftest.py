"""Global test fixtures for the document browser test-suite."""
import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# ---------------------------------------------------------------------------
# Ensure the repository root is on sys.path so that `import docbrowser_project`
# is always resolvable when tests are run from any working directory (e.g., CI).
# ---------------------------------------------------------------------------
_repo_root = Path(__file__).resolve().parent.parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

# Run Qt headless unless the environment already chose a platform plugin.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeHost:
    """Plain-Python host: no Qt, callbacks stored in a list.

    ``set_current_page`` notifies even when the page does not change so tests
    can check that duplicate notifications are harmless.
    """

    def __init__(self, page_count: int, current: int = 0):
        self.page_count = page_count
        self.current = current
        self.writes: list[int] = []
        self._callbacks: list[Callable[[int, int], None]] = []

    def get_page_count(self) -> int:
        return self.page_count

    def get_current_page(self) -> int:
        return self.current

    def set_current_page(self, page: int) -> None:
        self.writes.append(page)
        old, self.current = self.current, page
        for cb in list(self._callbacks):
            cb(page, old)

    def subscribe(self, callback) -> None:
        self._callbacks.append(callback)


@pytest.fixture
def fake_host():
    """Factory: ``fake_host(page_count, current=0)``."""
    return FakeHost


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point SettingsService at a throw-away file and start every test fresh."""
    from docbrowser_project.src.services.settings_service import SettingsService

    monkeypatch.setattr(SettingsService, "_path", tmp_path / "settings.json")
    SettingsService.reset_instance()
    yield
    SettingsService.reset_instance()
