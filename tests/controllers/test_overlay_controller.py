"""OverlayController: mode transitions, toggles, search and selection."""

import pytest

from docbrowser_project.src.controllers.navigation_controller import NavigationController
from docbrowser_project.src.controllers.overlay_controller import OverlayController
from docbrowser_project.src.controllers.page_state import PageStateAdapter
from docbrowser_project.src.models.multistate_document import MultiStateDocument
from docbrowser_project.src.models.overlay_state import SEARCH_PANE, TOC_PANE, OverlayMode
from docbrowser_project.src.models.search_index import SearchIndex
from docbrowser_project.src.models.toc import TableOfContents

TOC = [{"name": "Ch1", "page": 1}, {"name": "Ch2", "page": 5}]
INDEX = {"Alpha": 2, "alphabet": [3, 4], "Beta": 7}


def _make(*, toc=TOC, index=INDEX, search_on_enter=False, page_count=10):
    doc = MultiStateDocument(page_count=page_count)
    contents = TableOfContents(toc)
    nav = NavigationController(PageStateAdapter(doc), contents.chapters)
    overlay = OverlayController(nav, contents, SearchIndex(index), search_on_enter=search_on_enter)
    states = []
    overlay.stateChanged.connect(states.append)
    return doc, nav, overlay, states


def test_initial_state(qtbot):
    _doc, nav, overlay, _ = _make()
    state = overlay.state
    assert state.mode is OverlayMode.NONE
    assert not state.visible
    assert state.active_pane == TOC_PANE
    assert [r.key for r in state.results] == ["Alpha", "alphabet", "Beta"]
    assert nav.state.controls_enabled


def test_open_toc_then_toggle_closes(qtbot):
    _doc, nav, overlay, states = _make()
    overlay.open_toc()
    assert overlay.mode is OverlayMode.TOC
    assert states[-1].visible and states[-1].active_pane == TOC_PANE
    assert not nav.state.controls_enabled

    overlay.toggle_toc()
    assert overlay.mode is OverlayMode.NONE
    assert not states[-1].visible
    assert nav.state.controls_enabled


def test_toggle_search_switches_pane(qtbot):
    _doc, nav, overlay, states = _make()
    overlay.toggle_toc()
    overlay.toggle_search()
    assert overlay.mode is OverlayMode.SEARCH
    assert states[-1].active_pane == SEARCH_PANE
    assert not nav.state.controls_enabled
    overlay.toggle_search()
    assert overlay.mode is OverlayMode.NONE
    assert states[-1].active_pane == TOC_PANE


def test_live_search_runs_per_keystroke(qtbot):
    _doc, _nav, overlay, states = _make()
    overlay.search_text_changed("ALP")
    assert [r.key for r in states[-1].results] == ["Alpha", "alphabet"]
    assert states[-1].search_text == "ALP"
    overlay.search_committed("beta")  # Enter does nothing extra in live mode
    assert [r.key for r in overlay.state.results] == ["Alpha", "alphabet"]


def test_search_on_enter_waits_for_commit(qtbot):
    _doc, _nav, overlay, _states = _make(search_on_enter=True)
    overlay.search_text_changed("beta")
    assert len(overlay.state.results) == 3
    overlay.search_committed("beta")
    assert [r.key for r in overlay.state.results] == ["Beta"]


def test_clear_search_lists_everything(qtbot):
    _doc, _nav, overlay, states = _make()
    overlay.run_search("zzz")
    assert states[-1].results == ()
    overlay.clear_search()
    assert states[-1].search_text == ""
    assert len(states[-1].results) == 3


def test_select_search_result_jumps_and_closes(qtbot):
    doc, nav, overlay, _ = _make()
    overlay.open_search()
    overlay.select_search_result(4)
    assert doc.get_current_page() == 3
    assert overlay.mode is OverlayMode.NONE
    assert nav.state.controls_enabled


def test_select_toc_entry_is_clamped(qtbot):
    doc, _nav, overlay, _ = _make(toc=[{"name": "Beyond", "page": 99}])
    overlay.open_toc()
    overlay.select_toc_entry(99)
    assert doc.get_current_page() == 9
    assert overlay.mode is OverlayMode.NONE


@pytest.mark.parametrize(
    "toc,index,toc_ok,search_ok",
    [(TOC, INDEX, True, True), ([], INDEX, False, True), (TOC, {}, True, False), ([], {}, False, False)],
)
def test_trigger_availability(qtbot, toc, index, toc_ok, search_ok):
    _doc, _nav, overlay, _ = _make(toc=toc, index=index)
    assert overlay.state.toc_available is toc_ok
    assert overlay.state.search_available is search_ok


def test_two_overlays_do_not_share_mode(qtbot):
    _d1, _n1, first, _ = _make()
    _d2, _n2, second, _ = _make()
    first.open_search()
    assert second.mode is OverlayMode.NONE
