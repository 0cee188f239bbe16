import json

import pytest
from PyPDF2 import PdfWriter

from docbrowser_project.src.models.pdf_document import DocumentLoadError, PdfDocument
from docbrowser_project.src.models.serializers import sidecar_path
from docbrowser_project.src.services.pdf_service import PAGE_CACHE_SIZE, PdfService


def _write_pdf(path, pages=5, outline=()):
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=200, height=200)
    parents = {}
    for level, title, page in outline:
        parent = parents.get(level - 1)
        parents[level] = writer.add_outline_item(title, page - 1, parent=parent)
    with path.open("wb") as f:
        writer.write(f)
    return path


@pytest.fixture
def pdf_with_outline(tmp_path):
    """Five blank pages with bookmarks Part 2 (p.4), Part 1 (p.1) > Section (p.2)."""
    return _write_pdf(
        tmp_path / "book.pdf",
        outline=[(1, "Part 2", 4), (1, "Part 1", 1), (2, "Section", 2)],
    )


@pytest.fixture
def svc(qtbot):
    service = PdfService()
    yield service
    service.close()


def test_load_pdf_reads_pages_and_outline(svc, pdf_with_outline):
    received = []
    svc.documentLoaded.connect(received.append)
    doc = svc.load_pdf(pdf_with_outline)
    assert isinstance(doc, PdfDocument)
    assert doc.get_page_count() == 5
    assert received == [5]
    names = [e.name for e in svc.options.toc]
    assert sorted(names) == ["Part 1", "Part 2"]
    part1 = next(e for e in svc.options.toc if e.name == "Part 1")
    assert [c.name for c in part1.items] == ["Section"]


def test_sidecar_overrides_outline(svc, pdf_with_outline):
    sidecar_path(pdf_with_outline).write_text(
        json.dumps({"toc": [{"name": "Custom", "page": 3}], "index": {"word": [2, 5]}}),
        encoding="utf-8",
    )
    svc.load_pdf(pdf_with_outline)
    assert [e.name for e in svc.options.toc] == ["Custom"]
    assert svc.options.index == {"word": [2, 5]}


def test_missing_file_raises(svc, tmp_path):
    with pytest.raises(FileNotFoundError):
        svc.load_pdf(tmp_path / "missing.pdf")


def test_garbage_file_raises_load_error(svc, tmp_path):
    bad = tmp_path / "bad.pdf"
    bad.write_bytes(b"this is not a pdf")
    with pytest.raises(DocumentLoadError):
        svc.load_pdf(bad)


def test_request_page_renders_and_caches(qtbot, svc, pdf_with_outline):
    svc.load_pdf(pdf_with_outline)
    results = []
    svc.pageImageReady.connect(lambda page, pix: results.append((page, pix)))

    svc.request_page(1, 1.0)
    assert results[0][0] == 1
    assert not results[0][1].isNull()
    assert results[0][1].width() == 200

    svc.request_page(1, 1.0)
    assert len(results) == 2
    assert results[1][1] is results[0][1] or results[1][1].cacheKey() == results[0][1].cacheKey()


def test_page_cache_is_bounded(qtbot, svc, tmp_path):
    pdf = _write_pdf(tmp_path / "long.pdf", pages=PAGE_CACHE_SIZE + 4)
    svc.load_pdf(pdf)
    for page in range(PAGE_CACHE_SIZE + 4):
        svc.request_page(page, 1.0)
    assert len(svc._page_cache) == PAGE_CACHE_SIZE
    assert (0, 1.0) not in svc._page_cache
    assert (PAGE_CACHE_SIZE + 3, 1.0) in svc._page_cache


def test_page_cache_keeps_recently_shown_pages(qtbot, svc, tmp_path):
    pdf = _write_pdf(tmp_path / "long.pdf", pages=PAGE_CACHE_SIZE + 1)
    svc.load_pdf(pdf)
    svc.request_page(0, 1.0)
    for page in range(1, PAGE_CACHE_SIZE):
        svc.request_page(page, 1.0)
    svc.request_page(0, 1.0)
    svc.request_page(PAGE_CACHE_SIZE, 1.0)
    assert (0, 1.0) in svc._page_cache
    assert (1, 1.0) not in svc._page_cache


def test_document_page_state(qtbot, svc, pdf_with_outline):
    doc = svc.load_pdf(pdf_with_outline)
    seen = []
    doc.subscribe(lambda new, old: seen.append((new, old)))
    doc.set_current_page(4)
    assert seen == [(4, 0)]
    with pytest.raises(ValueError):
        doc.render_page(9)
