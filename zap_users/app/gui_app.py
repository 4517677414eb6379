from __future__ import annotations

import tkinter as tk

from zap_users.app.application.extension_registry import ExtensionRegistry
from zap_users.app.config import AppConfig
from zap_users.app.domain.errors import ConfigurationError, UsersLookupError
from zap_users.app.gui_views import UsersWindow
from zap_users.app.infrastructure.errors.error_mapper import ErrorMapper
from zap_users.app.ui.components.users_multi_select_list import UsersMultiSelectList
from zap_users.app.ui.components.users_tree_view import UsersTreeView


class GuiApp:
    def __init__(
        self,
        config: AppConfig,
        registry: ExtensionRegistry,
        *,
        window_cls: type[UsersWindow] = UsersWindow,
        view_cls: type[UsersTreeView] = UsersTreeView,
    ) -> None:
        self.config = config
        self.registry = registry
        self._view_cls = view_cls
        self.users_list: UsersMultiSelectList | None = None
        self.root = tk.Tk()
        self.window = window_cls(
            self.root,
            context_id=config.context_id,
            on_reload=self.reload,
            on_exit=self.root.destroy,
        )
        try:
            self._build_users_list(config.context_id)
        except ConfigurationError:
            self.root.destroy()
            raise
        except UsersLookupError as error:
            # Window stays up with an empty list; Reload builds it once the context resolves
            self.window.set_error(ErrorMapper.to_display_message(error))

    def run(self) -> None:
        self.root.mainloop()

    def reload(self, raw_context_id: str) -> None:
        try:
            context_id = int(raw_context_id.strip())
        except ValueError:
            self.window.set_error(f"Context ID must be a number, got {raw_context_id!r}")
            return
        try:
            if self.users_list is None:
                self._build_users_list(context_id)
            else:
                self.users_list.reload(context_id)
        except UsersLookupError as error:
            self.window.set_error(ErrorMapper.to_display_message(error))
            return
        self.window.set_error("")

    def _build_users_list(self, context_id: int) -> None:
        self.users_list = UsersMultiSelectList.from_registry(
            self.window.list_frame,
            self.registry,
            context_id,
            self.config.selection_mode,
            view_cls=self._view_cls,
        )
        self.users_list.view.pack(fill="both", expand=True)


def run_gui_app(config: AppConfig, registry: ExtensionRegistry) -> None:
    GuiApp(config, registry).run()
