from __future__ import annotations

import logging

from zap_users.app.application.user_management import UserManagementProvider
from zap_users.app.domain.errors import UsersLookupError
from zap_users.app.domain.models.user import User
from zap_users.app.infrastructure.logging.logger import get_logger, log_action


class LoadContextUsersUseCase:
    def __init__(self, provider: UserManagementProvider, logger: logging.Logger | None = None) -> None:
        self.provider = provider
        self.logger = logger or get_logger("zap_users.users")

    def execute(self, context_id: int) -> list[User]:
        try:
            users = list(self.provider.users_for_context(context_id))
        except UsersLookupError as error:
            log_action(self.logger, "users", "load", context_id, "error", error_code=error.code)
            raise
        except Exception as error:
            log_action(self.logger, "users", "load", context_id, "error", error_code="PROVIDER_ERROR")
            raise UsersLookupError(context_id, str(error) or type(error).__name__, code="PROVIDER_ERROR") from error
        log_action(self.logger, "users", "load", context_id, "success", user_count=len(users))
        return users
