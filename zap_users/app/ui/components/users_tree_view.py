from __future__ import annotations

import tkinter as tk
from tkinter import font as tkfont
from tkinter import ttk
from typing import Callable

from zap_users.app.domain.models.selection_mode import SelectionMode
from zap_users.app.ui.user_list_renderer import Padding, RenderedRow

STYLE_NAME = "Users.Treeview"


class UsersTreeView:
    def __init__(
        self,
        master: tk.Misc,
        *,
        selection_mode: SelectionMode,
        padding: Padding,
        on_select: Callable[[list[int]], None] | None = None,
    ) -> None:
        style = ttk.Style(master)
        line_height = tkfont.nametofont("TkDefaultFont").metrics("linespace")
        style.configure(STYLE_NAME, rowheight=line_height + padding.top + padding.bottom, indent=0)
        style.configure(f"{STYLE_NAME}.Item", padding=padding.as_ttk())

        self._on_select = on_select
        self._syncing = False
        self.tree = ttk.Treeview(master, show="tree", selectmode=selection_mode.tk_selectmode, style=STYLE_NAME)
        self.tree.column("#0", stretch=True)
        self.tree.bind("<<TreeviewSelect>>", self._handle_select)

    def pack(self, **kwargs) -> None:
        self.tree.pack(**kwargs)

    def show_rows(self, rows: list[RenderedRow]) -> None:
        self._syncing = True
        try:
            self.tree.delete(*self.tree.get_children())
            for index, row in enumerate(rows):
                self.tree.insert("", "end", iid=str(index), text=row.text)
        finally:
            self._syncing = False

    def set_selection(self, indices: list[int]) -> None:
        self._syncing = True
        try:
            self.tree.selection_set([str(index) for index in indices])
        finally:
            self._syncing = False

    def selected_indices(self) -> list[int]:
        return sorted(int(iid) for iid in self.tree.selection())

    def _handle_select(self, _event: tk.Event) -> None:
        if self._syncing or self._on_select is None:
            return
        self._on_select(self.selected_indices())
