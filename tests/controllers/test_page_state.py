"""PageStateAdapter: clamping and change re-emission."""

import pytest

from docbrowser_project.src.controllers.page_state import PageStateAdapter
from docbrowser_project.src.models.multistate_document import MultiStateDocument


@pytest.mark.parametrize("requested,expected", [(-5, 0), (-1, 0), (0, 0), (3, 3), (9, 9), (10, 9), (500, 9)])
def test_go_to_page_clamps(qtbot, fake_host, requested, expected):
    host = fake_host(10, current=5)
    adapter = PageStateAdapter(host)
    adapter.go_to_page(requested)
    assert host.writes == [expected]
    assert host.current == expected


def test_reads_go_to_host_every_time(qtbot, fake_host):
    host = fake_host(4, current=1)
    adapter = PageStateAdapter(host)
    host.page_count = 8
    host.current = 6
    assert adapter.page_count() == 8
    assert adapter.current_page() == 6
    adapter.go_to_page(7)
    assert host.current == 7


def test_external_changes_are_reemitted(qtbot, fake_host):
    host = fake_host(10)
    adapter = PageStateAdapter(host)
    seen = []
    adapter.on_page_changed(lambda new, old: seen.append((new, old)))
    host.set_current_page(3)  # someone else moves the page
    adapter.go_to_page(5)     # adapter's own write
    assert seen == [(3, 0), (5, 3)]


def test_empty_document_is_left_alone(qtbot, fake_host):
    host = fake_host(0)
    adapter = PageStateAdapter(host)
    adapter.go_to_page(3)
    assert host.writes == []


def test_repeated_request_does_not_renotify(qtbot):
    doc = MultiStateDocument(page_count=10)
    adapter = PageStateAdapter(doc)
    seen = []
    adapter.pageChanged.connect(lambda new, old: seen.append(new))
    adapter.go_to_page(50)
    adapter.go_to_page(50)
    adapter.go_to_page(9)
    assert seen == [9]
    assert doc.get_current_page() == 9


def test_multistate_document_rejects_out_of_range(qtbot):
    doc = MultiStateDocument(page_count=3)
    with pytest.raises(ValueError):
        doc.set_current_page(3)
    with pytest.raises(ValueError):
        MultiStateDocument(page_count=3, current_page=5)
