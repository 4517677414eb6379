from __future__ import annotations

from dataclasses import dataclass

from zap_users.app.domain.models.user import User


@dataclass(frozen=True)
class Padding:
    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0

    def as_ttk(self) -> tuple[int, int, int, int]:
        return (self.left, self.top, self.right, self.bottom)


@dataclass(frozen=True)
class RenderedRow:
    text: str
    padding: Padding
    selected: bool = False
    focused: bool = False


ROW_PADDING = Padding(top=2, left=8, bottom=2, right=8)
EMPTY_PADDING = Padding()


class UserListRenderer:
    """Maps a user to the row shown in the list; empty slots get the default row."""

    padding = ROW_PADDING

    def render(self, user: User | None, *, selected: bool = False, focused: bool = False) -> RenderedRow:
        if user is None:
            return RenderedRow(text="", padding=EMPTY_PADDING, selected=selected, focused=focused)
        return RenderedRow(text=user.name, padding=self.padding, selected=selected, focused=focused)
