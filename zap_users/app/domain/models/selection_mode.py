from __future__ import annotations

from enum import Enum


class SelectionMode(str, Enum):
    SINGLE = "single"
    CONTIGUOUS_RANGE = "contiguous_range"
    MULTIPLE = "multiple"

    @classmethod
    def parse(cls, value: "SelectionMode | str") -> "SelectionMode":
        if isinstance(value, SelectionMode):
            return value
        normalized = str(value or "").strip().lower().replace("-", "_")
        if normalized == "range":
            return cls.CONTIGUOUS_RANGE
        for mode in cls:
            if normalized in {mode.value, mode.name.lower()}:
                return mode
        raise ValueError(f"unknown selection mode: {value!r}")

    @property
    def tk_selectmode(self) -> str:
        # ttk.Treeview only knows browse/extended/none; range collapsing is done by the model
        return "browse" if self is SelectionMode.SINGLE else "extended"

    def constrain(self, indices: list[int]) -> list[int]:
        if not indices:
            return []
        ordered = sorted(set(indices))
        if self is SelectionMode.SINGLE:
            return [ordered[-1]]
        if self is SelectionMode.CONTIGUOUS_RANGE:
            return list(range(ordered[0], ordered[-1] + 1))
        return ordered
