from __future__ import annotations

import os
from dataclasses import dataclass

from clients.zap_api_client.config import load_dotenv

from zap_users.app.domain.models.selection_mode import SelectionMode

PROVIDERS = {"memory", "api"}


@dataclass(frozen=True)
class AppConfig:
    provider: str
    context_id: int
    selection_mode: str

    @classmethod
    def from_env(cls, env_file: str = ".env") -> "AppConfig":
        load_dotenv(env_file)
        config = cls(
            provider=os.getenv("ZAP_USERS_PROVIDER", "memory").strip().lower(),
            context_id=int(os.getenv("ZAP_USERS_CONTEXT_ID", "1")),
            selection_mode=os.getenv("ZAP_USERS_SELECTION_MODE", "multiple").strip().lower(),
        )
        config.validate()
        return config

    def validate(self) -> None:
        if self.provider not in PROVIDERS:
            raise ValueError(f"ZAP_USERS_PROVIDER must be one of {sorted(PROVIDERS)}")
        if self.context_id < 0:
            raise ValueError("ZAP_USERS_CONTEXT_ID must be >= 0")
        SelectionMode.parse(self.selection_mode)
