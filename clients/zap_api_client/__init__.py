from clients.zap_api_client.config import SDKConfig
from clients.zap_api_client.errors import ApiError
from clients.zap_api_client.http_client import HttpClient
from clients.zap_api_client.users_client import UsersClient

__all__ = [
    "SDKConfig",
    "ApiError",
    "HttpClient",
    "UsersClient",
]
