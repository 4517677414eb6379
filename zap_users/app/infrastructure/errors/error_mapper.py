from clients.zap_api_client.errors import ApiError

from zap_users.app.domain.errors import ConfigurationError, UsersLookupError


class ErrorMapper:
    _KNOWN_CODES = {
        "CONTEXT_NOT_FOUND": ("The context does not exist.", "Check the context id and reload."),
        "context_not_found": ("The context does not exist.", "Check the context id and reload."),
        "PROVIDER_ERROR": ("The user-management provider failed.", "Reload the list; restart the host if it persists."),
        "NETWORK_ERROR": ("The proxy API is not reachable.", "Check that the proxy is running and reload."),
        "bad_api_key": ("The proxy rejected the API key.", "Set ZAP_API_KEY to the key configured in the proxy."),
        "illegal_parameter": ("The proxy rejected the request parameters.", "Use a numeric context id."),
    }

    _STATUS_HINTS = {
        400: ("BAD_REQUEST", "The proxy rejected the request.", "Check the context id and reload."),
        403: ("PERMISSION_DENIED", "The proxy refused access to the API.", "Check ZAP_API_KEY and the API address allow list."),
        500: ("INTERNAL_ERROR", "The proxy API failed.", "Reload and check the proxy log if it persists."),
    }

    @classmethod
    def to_payload(cls, error: Exception) -> dict:
        if isinstance(error, ConfigurationError):
            return {
                "code": "CONFIGURATION_ERROR",
                "message": str(error),
                "trace_id": None,
                "suggestion": "Enable the user-management extension before opening this view.",
            }
        if isinstance(error, UsersLookupError):
            message, suggestion = cls._KNOWN_CODES.get(error.code, (error.message, "Reload the list."))
            return {
                "code": error.code,
                "message": message,
                "trace_id": error.trace_id,
                "suggestion": suggestion,
            }
        if isinstance(error, ApiError):
            if error.code in cls._KNOWN_CODES:
                message, suggestion = cls._KNOWN_CODES[error.code]
                code = error.code
            else:
                status_code = error.status_code or -1
                mapped = cls._STATUS_HINTS.get(status_code)
                if mapped is None and status_code >= 500:
                    mapped = cls._STATUS_HINTS[500]
                if mapped is not None:
                    code, message, suggestion = mapped
                else:
                    code, message, suggestion = error.code, error.message, "Reload the list."
            return {
                "code": code,
                "message": message,
                "trace_id": error.trace_id,
                "suggestion": suggestion,
            }
        return {
            "code": "INTERNAL_ERROR",
            "message": str(error),
            "trace_id": None,
            "suggestion": "Reload and report the incident if it persists.",
        }

    @classmethod
    def to_display_message(cls, error: Exception) -> str:
        payload = cls.to_payload(error)
        return f"[{payload['code']}] {payload['message']} (trace_id={payload['trace_id']})"
