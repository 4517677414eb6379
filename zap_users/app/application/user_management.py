from __future__ import annotations

from typing import Protocol

from zap_users.app.domain.errors import UsersLookupError
from zap_users.app.domain.models.user import User


class UserManagementProvider(Protocol):
    def users_for_context(self, context_id: int) -> list[User]:
        ...


class ContextUserManager:
    """Users of a single context, kept in insertion order."""

    def __init__(self, context_id: int) -> None:
        self.context_id = context_id
        self._users: list[User] = []
        self._next_id = 0

    def get_users(self) -> list[User]:
        return list(self._users)

    def add_user(self, name: str, *, enabled: bool = True) -> User:
        user = User(id=self._next_id, context_id=self.context_id, name=name, enabled=enabled)
        self._next_id += 1
        self._users.append(user)
        return user


class InMemoryUserManagement:
    def __init__(self) -> None:
        self._managers: dict[int, ContextUserManager] = {}

    def register_context(self, context_id: int) -> ContextUserManager:
        manager = self._managers.get(context_id)
        if manager is None:
            manager = ContextUserManager(context_id)
            self._managers[context_id] = manager
        return manager

    def get_context_user_manager(self, context_id: int) -> ContextUserManager:
        manager = self._managers.get(context_id)
        if manager is None:
            raise UsersLookupError(context_id, "Context is not registered", code="CONTEXT_NOT_FOUND")
        return manager

    def users_for_context(self, context_id: int) -> list[User]:
        return self.get_context_user_manager(context_id).get_users()
