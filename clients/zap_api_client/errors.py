from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class ApiError(Exception):
    code: str
    message: str
    details: dict[str, Any] | list[Any] | str | None = None
    trace_id: str | None = None
    status_code: int | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    @classmethod
    def from_http_response(cls, response: httpx.Response) -> "ApiError":
        trace_id = response.headers.get("X-Trace-ID") or response.headers.get("X-Trace-Id")
        try:
            payload = response.json()
        except ValueError:
            return cls(
                code="HTTP_ERROR",
                message=response.text or "HTTP request failed",
                details=None,
                trace_id=trace_id,
                status_code=response.status_code,
            )

        # The proxy API reports failures as {"code": "context_not_found", "message": "..."}
        if isinstance(payload, dict):
            return cls(
                code=str(payload.get("code") or "HTTP_ERROR"),
                message=str(payload.get("message") or response.text or "HTTP request failed"),
                details=payload.get("detail") or payload.get("details"),
                trace_id=trace_id,
                status_code=response.status_code,
            )

        return cls(
            code="HTTP_ERROR",
            message=response.text or "HTTP request failed",
            details=payload,
            trace_id=trace_id,
            status_code=response.status_code,
        )
