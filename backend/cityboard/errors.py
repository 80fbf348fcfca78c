"""Error taxonomy shared by the provider adapters and the API layer."""
from typing import Any, Optional


class DashboardError(Exception):
    """Base class for errors that map onto an HTTP status and a JSON body."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_body(self) -> dict:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class MissingParameter(DashboardError):
    """A required query parameter was absent or blank."""

    status_code = 400
    default_message = "Missing required query parameter"


class ConfigMissing(DashboardError):
    """A provider credential is not configured."""

    status_code = 500

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Server configuration error: {variable} not set")


class UpstreamNotFound(DashboardError):
    """The provider reported that the requested resource does not exist."""

    status_code = 404
    default_message = "Resource not found"


class UpstreamBadRequest(DashboardError):
    """The provider rejected the request as malformed."""

    status_code = 400
    default_message = "Bad request"

    def to_body(self) -> dict:
        # Bad request bodies always echo provider diagnostics, even when empty
        return {"error": self.message, "details": self.details}


class UpstreamBadGateway(DashboardError):
    """The provider answered but flagged its own response as unsuccessful."""

    status_code = 502
    default_message = "Failed to fetch data from provider"

    def to_body(self) -> dict:
        return {"error": self.message, "details": self.details}


class RateNotFound(DashboardError):
    """A currency code is missing from the provider's rate table."""

    status_code = 404
    default_message = "Currency rate not found"


class UpstreamUnavailable(DashboardError):
    """Network, transport or unknown provider failure."""

    status_code = 500
    default_message = "Failed to fetch data"
