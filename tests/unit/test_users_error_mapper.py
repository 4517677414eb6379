from clients.zap_api_client.errors import ApiError

from zap_users.app.domain.errors import ConfigurationError, UsersLookupError
from zap_users.app.infrastructure.errors.error_mapper import ErrorMapper


def test_configuration_error_payload() -> None:
    payload = ErrorMapper.to_payload(ConfigurationError("required provider not initialized"))

    assert payload["code"] == "CONFIGURATION_ERROR"
    assert payload["message"] == "required provider not initialized"


def test_lookup_error_known_code() -> None:
    error = UsersLookupError(3, "Context is not registered", code="CONTEXT_NOT_FOUND")

    assert ErrorMapper.to_display_message(error) == "[CONTEXT_NOT_FOUND] The context does not exist. (trace_id=None)"


def test_lookup_error_unknown_code_keeps_message() -> None:
    payload = ErrorMapper.to_payload(UsersLookupError(3, "boom", code="SOMETHING", trace_id="t-1"))

    assert payload["message"] == "boom"
    assert payload["trace_id"] == "t-1"


def test_api_error_status_hints() -> None:
    assert ErrorMapper.to_payload(ApiError(code="X", message="m", status_code=403))["code"] == "PERMISSION_DENIED"
    assert ErrorMapper.to_payload(ApiError(code="X", message="m", status_code=503))["code"] == "INTERNAL_ERROR"
    assert ErrorMapper.to_payload(ApiError(code="bad_api_key", message="m", status_code=400))["code"] == "bad_api_key"


def test_unexpected_error_is_internal() -> None:
    payload = ErrorMapper.to_payload(RuntimeError("oops"))

    assert payload["code"] == "INTERNAL_ERROR"
    assert payload["message"] == "oops"
