from __future__ import annotations

from typing import Any


def normalize_user(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        return {}
    return {
        "id": _to_int(payload.get("id")),
        "context_id": _to_int(payload.get("contextId", payload.get("context_id"))),
        "name": str(payload.get("name") or ""),
        "enabled": _to_bool(payload.get("enabled"), default=True),
    }


def normalize_users_list(payload: Any) -> list[dict[str, Any]]:
    rows: list[Any] = []
    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, dict):
        for key in ("usersList", "users", "data"):
            if isinstance(payload.get(key), list):
                rows = payload[key]
                break
    # rows without a usable id are dropped
    return [user for user in (normalize_user(row) for row in rows) if user.get("id") is not None]


def _to_int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _to_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    normalized = str(value).strip().lower()
    if normalized in {"true", "1", "yes"}:
        return True
    if normalized in {"false", "0", "no"}:
        return False
    return default
