from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class User:
    id: int
    context_id: int
    name: str
    enabled: bool = True

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_payload(cls, payload: dict[str, Any], context_id: int) -> "User":
        raw_id = payload.get("id")
        if raw_id is None:
            raise ValueError(f"user payload without id: {payload!r}")
        payload_context = payload.get("context_id")
        return cls(
            id=int(raw_id),
            context_id=int(payload_context) if payload_context is not None else context_id,
            name=str(payload.get("name") or ""),
            enabled=bool(payload.get("enabled", True)),
        )
