from clients.zap_api_client.errors import ApiError
from clients.zap_api_client.users_client import UsersClient

from zap_users.app.domain.errors import UsersLookupError
from zap_users.app.domain.models.user import User


class ApiUserManagement:
    def __init__(self, users_client: UsersClient) -> None:
        self.users_client = users_client

    def users_for_context(self, context_id: int) -> list[User]:
        try:
            rows = self.users_client.users_list(context_id)
        except ApiError as error:
            raise UsersLookupError(context_id, error.message, code=error.code, trace_id=error.trace_id) from error
        return [User.from_payload(row, context_id) for row in rows]

