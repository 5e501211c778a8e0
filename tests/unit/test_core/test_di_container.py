"""Tests for dependency injection container."""


def test_container_create_with_custom_settings(dispatcher):
    from pagedlist.config import PagingSettings
    from pagedlist.core.di_container import PagingContainer

    settings = PagingSettings(page_size=15, load_on_attach=False)

    container = PagingContainer.create(settings=settings, dispatcher=dispatcher)

    assert container.settings.page_size == 15
    assert container.dispatcher is dispatcher


def test_container_controller_lazy_initialization(dispatcher):
    from pagedlist.config import PagingSettings
    from pagedlist.core.di_container import PagingContainer

    container = PagingContainer.create(
        settings=PagingSettings(load_on_attach=False), dispatcher=dispatcher
    )
    assert container._controller is None

    controller = container.controller

    assert controller is not None
    assert container._controller is controller
    assert controller.load_on_attach is False
    assert controller.dispatcher is dispatcher


def test_container_controller_singleton(dispatcher):
    from pagedlist.config import PagingSettings
    from pagedlist.core.di_container import PagingContainer

    container = PagingContainer.create(settings=PagingSettings(), dispatcher=dispatcher)

    assert container.controller is container.controller


def test_container_create_loader_applies_settings(dispatcher, scripted_source, placeholder):
    from pagedlist.config import PagingSettings
    from pagedlist.core.di_container import PagingContainer

    container = PagingContainer.create(
        settings=PagingSettings(page_size=25, offset=50), dispatcher=dispatcher
    )

    loader = container.create_loader(scripted_source(), placeholder=placeholder)

    assert loader.page_size == 25
    assert loader.offset == 50
    assert loader.current_position == 50
    assert loader.placeholder is placeholder
    assert container.controller.page_loader is loader
    assert loader.is_connected is True


def test_container_create_with_defaults(monkeypatch, tmp_path):
    import pytest

    pytest.importorskip("gi.repository.GLib")
    from pagedlist.core.di_container import PagingContainer
    from pagedlist.services.glib_dispatcher import GLibDispatcher

    monkeypatch.chdir(tmp_path)

    container = PagingContainer.create()

    assert container.settings.page_size == 20
    assert isinstance(container.dispatcher, GLibDispatcher)


def test_container_scroll_source_uses_threshold_setting(dispatcher):
    import pytest

    gi = pytest.importorskip("gi")
    try:
        gi.require_version("Gtk", "4.0")
    except ValueError:
        pytest.skip("GTK 4 not available")
    Gtk = pytest.importorskip("gi.repository.Gtk")
    from pagedlist.config import PagingSettings
    from pagedlist.core.di_container import PagingContainer

    container = PagingContainer.create(
        settings=PagingSettings(scroll_threshold=120), dispatcher=dispatcher
    )
    container.controller.add_items(["a", "b", "c"])
    adjustment = Gtk.Adjustment(
        value=0, lower=0, upper=1000, step_increment=10, page_increment=100, page_size=100
    )

    scroll_source = container.create_scroll_source(adjustment)
    reported = []
    scroll_source.add_scroll_listener(reported.append)

    assert scroll_source.threshold == 120

    adjustment.set_value(770)
    assert reported == []

    adjustment.set_value(800)
    assert reported == [2]
