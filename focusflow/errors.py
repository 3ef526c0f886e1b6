"""
Error taxonomy shared by the core and the HTTP layer.

ValidationError and NotFoundError are request-scoped and map onto HTTP
status codes. UpstreamUnavailable is raised by the AI capabilities and is
always caught at the call site, where a local fallback is substituted.
"""


class FocusFlowError(Exception):
    """Base class for FocusFlow errors."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FocusFlowError):
    """A required field is missing or invalid."""

    status_code = 400
    code = "VALIDATION_ERROR"


class NotFoundError(FocusFlowError):
    """No task exists with the requested id."""

    status_code = 404
    code = "NOT_FOUND"


class UpstreamUnavailable(FocusFlowError):
    """External generation call failed, timed out, or returned junk."""

    status_code = 502
    code = "UPSTREAM_UNAVAILABLE"


__all__ = ["FocusFlowError", "ValidationError", "NotFoundError", "UpstreamUnavailable"]
