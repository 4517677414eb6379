from __future__ import annotations

from typing import Any

from clients.zap_api_client.http_client import HttpClient
from clients.zap_api_client.normalizers import normalize_users_list


class UsersClient:
    def __init__(self, http_client: HttpClient) -> None:
        self.http_client = http_client

    def users_list(self, context_id: int) -> list[dict[str, Any]]:
        payload = self.http_client.request(
            "GET",
            "/JSON/users/view/usersList/",
            params={"contextId": context_id},
        )
        return normalize_users_list(payload)

