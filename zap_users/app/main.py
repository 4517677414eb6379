from __future__ import annotations

import os
import sys

from zap_users.app.application.extension_registry import ExtensionRegistry
from zap_users.app.application.use_cases.load_context_users_use_case import LoadContextUsersUseCase
from zap_users.app.bootstrap import build_registry
from zap_users.app.config import AppConfig
from zap_users.app.domain.errors import ConfigurationError, UsersLookupError
from zap_users.app.infrastructure.errors.error_mapper import ErrorMapper
from zap_users.app.ui.table_printer import print_users_table


def resolve_ui_mode(raw_mode: str | None = None) -> str:
    source = raw_mode if raw_mode is not None else os.getenv("ZAP_USERS_UI", "gui")
    normalized = source.strip().lower()
    return "cli" if normalized == "cli" else "gui"


def run_cli(config: AppConfig, registry: ExtensionRegistry) -> int:
    try:
        provider = registry.resolve_user_management_provider()
        if provider is None:
            raise ConfigurationError("required provider not initialized")
        users = LoadContextUsersUseCase(provider).execute(config.context_id)
    except (ConfigurationError, UsersLookupError) as error:
        print(ErrorMapper.to_display_message(error), file=sys.stderr)
        return 1
    print_users_table(f"Users of context {config.context_id}", users)
    return 0


def main() -> int:
    config = AppConfig.from_env()
    registry = build_registry(config)
    if resolve_ui_mode() == "cli":
        return run_cli(config, registry)

    from zap_users.app.gui_app import run_gui_app

    run_gui_app(config, registry)
    return 0


if __name__ == "__main__":
    sys.exit(main())
