from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from zap_users.app.domain.models.selection_mode import SelectionMode
from zap_users.app.domain.models.user import User


@dataclass
class UsersListModel:
    selection_mode: SelectionMode
    context_id: int | None = None
    users: tuple[User, ...] = ()
    selected_indices: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.users)

    def __iter__(self) -> Iterator[User]:
        return iter(self.users)

    def __getitem__(self, index: int) -> User:
        return self.users[index]

    def replace(self, context_id: int, users: Iterable[User]) -> None:
        self.context_id = context_id
        self.users = tuple(users)
        self.selected_indices = []

    def select(self, indices: Iterable[int]) -> list[int]:
        requested = list(indices)
        for index in requested:
            if not 0 <= index < len(self.users):
                raise IndexError(f"row {index} outside 0..{len(self.users) - 1}")
        self.selected_indices = self.selection_mode.constrain(requested)
        return list(self.selected_indices)

    def clear_selection(self) -> None:
        self.selected_indices = []

    def selected_users(self) -> list[User]:
        return [self.users[index] for index in self.selected_indices]
