from __future__ import annotations

from clients.zap_api_client.config import SDKConfig
from clients.zap_api_client.http_client import HttpClient
from clients.zap_api_client.users_client import UsersClient

from zap_users.app.application.extension_registry import ExtensionRegistry
from zap_users.app.application.user_management import InMemoryUserManagement
from zap_users.app.config import AppConfig
from zap_users.app.infrastructure.api_adapter.users_api_adapter import ApiUserManagement

DEMO_USERS = ("alice", "bob", "carol")


def build_registry(config: AppConfig, sdk_config: SDKConfig | None = None) -> ExtensionRegistry:
    registry = ExtensionRegistry()
    if config.provider == "api":
        http_client = HttpClient(config=sdk_config or SDKConfig.from_env())
        registry.register_user_management(ApiUserManagement(UsersClient(http_client)))
        return registry

    provider = InMemoryUserManagement()
    manager = provider.register_context(config.context_id)
    for name in DEMO_USERS:
        manager.add_user(name)
    registry.register_user_management(provider)
    return registry
