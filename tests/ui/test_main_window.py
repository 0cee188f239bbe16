"""MainWindow: opening PDFs and wiring the browser widgets."""

import pytest
from PyPDF2 import PdfWriter

from docbrowser_project.src.services.pdf_service import PdfService
from docbrowser_project.src.services.settings_service import SettingsService
from docbrowser_project.src.ui.main_window import MainWindow


@pytest.fixture
def pdf_file(tmp_path):
    writer = PdfWriter()
    for _ in range(4):
        writer.add_blank_page(width=100, height=150)
    writer.add_outline_item("Start", 0)
    writer.add_outline_item("End", 3)
    path = tmp_path / "four.pdf"
    with path.open("wb") as f:
        writer.write(f)
    return path


@pytest.fixture
def window(qtbot):
    win = MainWindow()
    qtbot.addWidget(win)
    yield win
    PdfService().close()


def test_page_actions_disabled_without_document(window):
    assert window.browser is None
    assert not window.next_page_action.isEnabled()
    assert not window.toc_action.isEnabled()


def test_open_pdf_builds_browser(window, pdf_file):
    assert window.open_pdf(pdf_file)
    assert window.browser is not None
    assert window.nav_bar.page_edit.text() == "1"
    assert window.browser.toc.chapters == [1, 4]
    assert window.next_page_action.isEnabled()
    assert window.overlay_panel.isHidden()

    window.next_page_action.trigger()
    assert window.nav_bar.page_edit.text() == "2"


def test_bar_position_from_settings(window, pdf_file):
    SettingsService().set_bar_position("top")
    window.open_pdf(pdf_file)
    assert window._column.indexOf(window.nav_bar) == 0


def test_failed_open_keeps_window_usable(window, tmp_path, monkeypatch):
    shown = []
    monkeypatch.setattr(
        "docbrowser_project.src.ui.main_window.QMessageBox.critical",
        lambda *args, **kwargs: shown.append(args),
    )
    assert not window.open_pdf(tmp_path / "missing.pdf")
    assert shown
    assert window.browser is None


def test_close_document(window, pdf_file):
    window.open_pdf(pdf_file)
    window.close_document()
    assert window.browser is None
    assert window.nav_bar is None
    assert not window.next_page_action.isEnabled()


def test_bad_settings_do_not_break_startup(qtbot, pdf_file):
    SettingsService._path.write_text(
        '{"page_zoom": "huge", "z_offset": "high", "icon_size": null}', encoding="utf-8"
    )
    SettingsService.reset_instance()
    win = MainWindow()
    qtbot.addWidget(win)
    try:
        assert win.page_view.zoom == 1.5
        assert win.open_pdf(pdf_file)
        assert win.browser.options.z_offset == 0.3
    finally:
        PdfService().close()
