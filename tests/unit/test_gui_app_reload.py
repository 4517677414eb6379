from __future__ import annotations

import pytest

from zap_users.app.application.extension_registry import ExtensionRegistry
from zap_users.app.application.user_management import InMemoryUserManagement
from zap_users.app.config import AppConfig
from zap_users.app.domain.errors import ConfigurationError
from zap_users.app.gui_app import GuiApp


class FakeTk:
    instances: list["FakeTk"] = []

    def __init__(self) -> None:
        self.destroyed = False
        FakeTk.instances.append(self)

    def destroy(self) -> None:
        self.destroyed = True

    def mainloop(self) -> None:
        return


class FakeWindow:
    def __init__(self, root, *, context_id, on_reload, on_exit) -> None:  # noqa: ANN001
        self.root = root
        self.context_id = context_id
        self.on_reload = on_reload
        self.on_exit = on_exit
        self.list_frame = object()
        self.errors: list[str] = []

    def set_error(self, message: str) -> None:
        self.errors.append(message)


class FakeView:
    def __init__(self, master, *, selection_mode, padding, on_select=None) -> None:  # noqa: ANN001
        self.master = master
        self.rows = []
        self.packed = False

    def show_rows(self, rows) -> None:  # noqa: ANN001
        self.rows = list(rows)

    def set_selection(self, indices) -> None:  # noqa: ANN001
        return

    def pack(self, **kwargs) -> None:
        self.packed = True


def _registry() -> ExtensionRegistry:
    provider = InMemoryUserManagement()
    provider.register_context(1).add_user("alice")
    second = provider.register_context(2)
    second.add_user("bob")
    second.add_user("carol")
    registry = ExtensionRegistry()
    registry.register_user_management(provider)
    return registry


def _app(monkeypatch, registry: ExtensionRegistry, context_id: int = 1) -> GuiApp:  # noqa: ANN001
    monkeypatch.setattr("zap_users.app.gui_app.tk.Tk", FakeTk)
    config = AppConfig(provider="memory", context_id=context_id, selection_mode="multiple")
    return GuiApp(config, registry, window_cls=FakeWindow, view_cls=FakeView)


def test_gui_app_shows_users_of_configured_context(monkeypatch) -> None:
    app = _app(monkeypatch, _registry())

    assert app.users_list.view.packed
    assert app.users_list.view.master is app.window.list_frame
    assert [row.text for row in app.users_list.view.rows] == ["alice"]


def test_reload_switches_context_and_clears_error(monkeypatch) -> None:
    app = _app(monkeypatch, _registry())

    app.window.on_reload(" 2 ")

    assert [user.name for user in app.users_list.users] == ["bob", "carol"]
    assert app.window.errors == [""]


def test_reload_unknown_context_shows_mapped_error(monkeypatch) -> None:
    app = _app(monkeypatch, _registry())

    app.reload("77")

    assert app.window.errors[-1].startswith("[CONTEXT_NOT_FOUND]")
    assert [user.name for user in app.users_list.users] == ["alice"]


def test_reload_rejects_non_numeric_context(monkeypatch) -> None:
    app = _app(monkeypatch, _registry())

    app.reload("abc")

    assert "must be a number" in app.window.errors[-1]


def test_gui_app_requires_user_management(monkeypatch) -> None:
    with pytest.raises(ConfigurationError):
        _app(monkeypatch, ExtensionRegistry())
    assert FakeTk.instances[-1].destroyed


def test_unknown_start_context_shows_error_and_reload_builds_list(monkeypatch) -> None:
    app = _app(monkeypatch, _registry(), context_id=9)

    assert app.users_list is None
    assert app.window.errors[-1].startswith("[CONTEXT_NOT_FOUND]")
    assert not FakeTk.instances[-1].destroyed

    app.window.on_reload("2")

    assert [user.name for user in app.users_list.users] == ["bob", "carol"]
    assert app.users_list.view.packed
    assert app.window.errors[-1] == ""


def test_reload_with_unknown_context_before_first_load_keeps_list_empty(monkeypatch) -> None:
    app = _app(monkeypatch, _registry(), context_id=9)

    app.reload("10")

    assert app.users_list is None
    assert app.window.errors[-1].startswith("[CONTEXT_NOT_FOUND]")
