from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when the host has not initialized a required collaborator."""


class UsersLookupError(LookupError):
    def __init__(
        self,
        context_id: int,
        message: str,
        *,
        code: str = "CONTEXT_USERS_UNAVAILABLE",
        trace_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.context_id = context_id
        self.code = code
        self.message = message
        self.trace_id = trace_id

    def __str__(self) -> str:
        return f"{self.code}: {self.message} (context_id={self.context_id})"
