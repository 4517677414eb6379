from __future__ import annotations

import tkinter as tk
from typing import Callable


class UsersWindow:
    def __init__(self, root: tk.Tk, *, context_id: int, on_reload: Callable[[str], None], on_exit: Callable[[], None]) -> None:
        self.root = root
        root.title("Context users")
        root.geometry("320x360")

        self.context_value = tk.StringVar(value=str(context_id))
        self.error_value = tk.StringVar(value="")
        self._on_reload = on_reload

        frame = tk.Frame(root, padx=12, pady=12)
        frame.pack(fill="both", expand=True)

        top = tk.Frame(frame)
        top.pack(fill="x", pady=(0, 8))
        tk.Label(top, text="Context ID:").pack(side="left")
        tk.Entry(top, textvariable=self.context_value, width=8).pack(side="left", padx=6)
        tk.Button(top, text="Reload", command=self._reload).pack(side="left")
        tk.Button(top, text="Exit", command=on_exit).pack(side="right")

        tk.Label(frame, textvariable=self.error_value, fg="#b00020", justify="left", anchor="w").pack(fill="x")
        self.list_frame = tk.Frame(frame)
        self.list_frame.pack(fill="both", expand=True)

    def _reload(self) -> None:
        self._on_reload(self.context_value.get())

    def set_error(self, message: str) -> None:
        self.error_value.set(message)
