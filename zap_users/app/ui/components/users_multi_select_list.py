from __future__ import annotations

import logging
import tkinter as tk
from collections.abc import Iterable

from zap_users.app.application.extension_registry import ExtensionRegistry
from zap_users.app.application.use_cases.load_context_users_use_case import LoadContextUsersUseCase
from zap_users.app.application.user_management import UserManagementProvider
from zap_users.app.domain.errors import ConfigurationError, UsersLookupError
from zap_users.app.domain.models.selection_mode import SelectionMode
from zap_users.app.domain.models.user import User
from zap_users.app.infrastructure.logging.logger import get_logger, log_action
from zap_users.app.ui.components.users_tree_view import UsersTreeView
from zap_users.app.ui.user_list_renderer import UserListRenderer
from zap_users.app.ui.users_list_model import UsersListModel


class UsersMultiSelectList:
    """List of the users of one context, with configurable selection.

    The list does not follow changes to the users; call :meth:`reload` whenever
    the users of the context may have changed.
    """

    def __init__(
        self,
        master: tk.Misc | None,
        context_id: int,
        selection_mode: SelectionMode | str,
        *,
        provider: UserManagementProvider | None,
        renderer: UserListRenderer | None = None,
        view_cls: type[UsersTreeView] = UsersTreeView,
        logger: logging.Logger | None = None,
    ) -> None:
        if provider is None:
            raise ConfigurationError("required provider not initialized")
        mode = SelectionMode.parse(selection_mode)

        self.logger = logger or get_logger("zap_users.users")
        self.renderer = renderer or UserListRenderer()
        self._load_users = LoadContextUsersUseCase(provider, logger=self.logger)
        self.model = UsersListModel(selection_mode=mode)
        # Fetch before building the toolkit widget so a failed first load leaves nothing behind
        try:
            users = self._load_users.execute(context_id)
        except UsersLookupError as error:
            log_action(self.logger, "users_list", "construct", context_id, "error", error_code=error.code)
            raise
        self.view = view_cls(
            master,
            selection_mode=mode,
            padding=self.renderer.padding,
            on_select=self._handle_view_selection,
        )
        self._apply(context_id, users)
        log_action(self.logger, "users_list", "construct", context_id, "success", user_count=len(users))

    @classmethod
    def from_registry(
        cls,
        master: tk.Misc | None,
        registry: ExtensionRegistry,
        context_id: int,
        selection_mode: SelectionMode | str,
        **kwargs,
    ) -> "UsersMultiSelectList":
        provider = registry.resolve_user_management_provider()
        if provider is None:
            raise ConfigurationError(
                "required provider not initialized: enable user management before creating the users list"
            )
        return cls(master, context_id, selection_mode, provider=provider, **kwargs)

    @property
    def context_id(self) -> int | None:
        return self.model.context_id

    @property
    def selection_mode(self) -> SelectionMode:
        return self.model.selection_mode

    @property
    def users(self) -> tuple[User, ...]:
        return self.model.users

    def __len__(self) -> int:
        return len(self.model)

    def reload(self, context_id: int) -> None:
        try:
            users = self._load_users.execute(context_id)
        except UsersLookupError as error:
            log_action(self.logger, "users_list", "reload", context_id, "error", error_code=error.code)
            raise
        self._apply(context_id, users)
        log_action(self.logger, "users_list", "reload", context_id, "success", user_count=len(users))

    def selected_users(self) -> list[User]:
        return self.model.selected_users()

    def selected_indices(self) -> list[int]:
        return list(self.model.selected_indices)

    def set_selected_indices(self, indices: Iterable[int]) -> list[int]:
        selected = self.model.select(indices)
        self.view.set_selection(selected)
        return selected

    def clear_selection(self) -> None:
        self.model.clear_selection()
        self.view.set_selection([])

    def _apply(self, context_id: int, users: list[User]) -> None:
        self.model.replace(context_id, users)
        self.view.show_rows([self.renderer.render(user) for user in self.model])

    def _handle_view_selection(self, indices: list[int]) -> None:
        selected = self.model.select(indices)
        if selected != indices:
            self.view.set_selection(selected)
