from __future__ import annotations

from typing import Any

from zap_users.app.application.user_management import UserManagementProvider

USER_MANAGEMENT = "user_management"


class ExtensionRegistry:
    def __init__(self) -> None:
        self._extensions: dict[str, Any] = {}

    def register(self, name: str, extension: Any) -> None:
        self._extensions[name] = extension

    def get_extension(self, name: str) -> Any | None:
        return self._extensions.get(name)

    def register_user_management(self, provider: UserManagementProvider) -> None:
        self.register(USER_MANAGEMENT, provider)

    def resolve_user_management_provider(self) -> UserManagementProvider | None:
        return self.get_extension(USER_MANAGEMENT)
