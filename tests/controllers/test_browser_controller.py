"""BrowserController: option merging and the combined view."""

import pytest

from docbrowser_project.src.controllers.browser_controller import BrowserController
from docbrowser_project.src.models.browser_options import BrowserOptions
from docbrowser_project.src.models.multistate_document import MultiStateDocument
from docbrowser_project.src.models.overlay_state import OverlayMode


@pytest.fixture
def doc(qtbot):
    return MultiStateDocument(page_count=10)


def test_defaults_without_options(doc):
    browser = BrowserController(doc)
    view = browser.view()
    assert view.navigation.page_text == "1"
    assert view.overlay.mode is OverlayMode.NONE
    assert not view.overlay.toc_available
    assert not view.overlay.search_available
    assert view.bar.anchor_y == 0.0


def test_unsorted_toc_is_normalised(doc):
    browser = BrowserController(
        doc,
        {"toc": [{"name": "B", "page": 7}, {"name": "A", "page": 2}], "position": "top"},
        width=4,
        height=6,
    )
    assert browser.toc.chapters == [2, 7]
    assert browser.navigation.chapters == [2, 7]
    assert browser.view().bar.anchor_y == 1.0
    assert browser.view().bar.x == pytest.approx(3)


def test_keyword_overrides_win(doc):
    browser = BrowserController(doc, BrowserOptions(search_on_enter=False), searchOnEnter=True)
    assert browser.options.search_on_enter is True
    assert browser.overlay.search_on_enter is True


def test_view_changed_follows_every_source(doc):
    browser = BrowserController(doc, {"toc": [{"name": "Ch", "page": 3}], "index": {"k": 2}})
    views = []
    browser.viewChanged.connect(views.append)

    doc.set_current_page(5)  # external
    assert views[-1].navigation.page_text == "6"

    browser.navigation.first()  # own jump
    assert views[-1].navigation.page_text == "1"

    browser.overlay.open_search()
    assert views[-1].overlay.visible
    assert not views[-1].navigation.controls_enabled

    browser.overlay.select_search_result(2)
    assert views[-1].navigation.page_text == "2"
    assert not views[-1].overlay.visible
    assert views[-1].navigation.controls_enabled


def test_refresh_publishes_current_view(doc):
    browser = BrowserController(doc)
    views = []
    browser.viewChanged.connect(views.append)
    view = browser.refresh()
    assert views == [view]
