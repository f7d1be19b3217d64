"""Error kinds surfaced to API callers.

Every failure the service reports is one of the classes below. Each carries a
status code and a one-line default message, rendered as ``{"error": message}``.
"""


class ApiError(Exception):
    status_code = 500
    detail = "Internal server error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.detail
        super().__init__(self.detail)


class Unauthorized(ApiError):
    status_code = 401
    detail = "Unauthorized"


class BadRequest(ApiError):
    status_code = 400
    detail = "Invalid request payload"


class MethodNotAllowed(ApiError):
    status_code = 405
    detail = "Method not allowed"


class InternalSigningError(ApiError):
    status_code = 500
    detail = "Failed to create token"


class InternalProviderError(ApiError):
    status_code = 500
    detail = "Failed to fetch response from OpenAI"


ERROR_KINDS = (Unauthorized, BadRequest, MethodNotAllowed, InternalSigningError, InternalProviderError)

ERROR_STATUS: dict[type[ApiError], int] = {kind: kind.status_code for kind in ERROR_KINDS}


def error_status(exc: ApiError) -> int:
    return exc.status_code


def error_body(exc: ApiError) -> dict:
    return {"error": exc.detail}
