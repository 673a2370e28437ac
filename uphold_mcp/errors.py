"""Error types raised by the Uphold client."""


class UpholdError(Exception):
    """Base error for the Uphold MCP server."""


class ConfigurationError(UpholdError):
    """Raised when the client is built without the settings it needs."""


class UpholdApiError(UpholdError):
    """Raised when the Uphold API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int, endpoint: str):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.endpoint = endpoint
