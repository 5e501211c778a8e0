"""Tests for AdjustmentScrollSource."""

import pytest


def _require_gtk():
    gi = pytest.importorskip("gi")
    try:
        gi.require_version("Gtk", "4.0")
    except ValueError:
        pytest.skip("GTK 4 not available")
    return pytest.importorskip("gi.repository.Gtk")


def _adjustment(Gtk):
    return Gtk.Adjustment(
        value=0, lower=0, upper=1000, step_increment=10, page_increment=100, page_size=100
    )


def test_scroll_source_reports_last_entry_near_bottom():
    Gtk = _require_gtk()
    from pagedlist.views.adjustment_scroll_source import AdjustmentScrollSource

    adjustment = _adjustment(Gtk)
    source = AdjustmentScrollSource(adjustment, lambda: 12, threshold=50)
    reported = []
    source.add_scroll_listener(reported.append)

    adjustment.set_value(500)
    assert reported == []

    adjustment.set_value(900)
    assert reported == [11]
    assert source.is_near_bottom() is True


def test_scroll_source_remove_listener():
    Gtk = _require_gtk()
    from pagedlist.views.adjustment_scroll_source import AdjustmentScrollSource

    adjustment = _adjustment(Gtk)
    source = AdjustmentScrollSource(adjustment, lambda: 3)
    reported = []
    handle = source.add_scroll_listener(reported.append)

    source.remove_scroll_listener(handle)
    adjustment.set_value(900)

    assert reported == []


def test_scroll_source_drives_manager(dispatcher, scripted_source, inline_runner, items):
    Gtk = _require_gtk()
    from pagedlist.managers import PageLoader, PaginatedListManager
    from pagedlist.views.adjustment_scroll_source import AdjustmentScrollSource
    from pagedlist.views.list_store_view import ListStoreView

    manager = PaginatedListManager(dispatcher)
    source = scripted_source(items(0, 10), items(10, 20))
    manager.set_page_loader(PageLoader(source, page_size=10, run_in_background=inline_runner))
    adjustment = _adjustment(Gtk)
    view = ListStoreView(AdjustmentScrollSource(adjustment, lambda: len(manager)))
    view.bind(manager)
    manager.attach_to(view)
    dispatcher.drain()

    adjustment.set_value(900)
    dispatcher.drain()

    assert manager.item_count == 20
    assert view.store.get_n_items() == 20
    assert source.calls == [(0, 10), (10, 10)]
