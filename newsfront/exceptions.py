class ConfigurationError(Exception):
    """Raised at startup when the application cannot be configured."""


class InvalidInputError(Exception):
    """Raised when request parameters are malformed."""


class IntegrationError(Exception):
    """Raised when an external API call fails."""


class UpstreamUnavailableError(IntegrationError):
    """Raised when the news API cannot be reached (DNS, connection, timeout)."""


class UpstreamStatusError(IntegrationError):
    """Raised when the news API answers with an error status."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"News API returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeError(IntegrationError):
    """Raised when the news API response cannot be decoded."""


class RenderError(Exception):
    """Raised when a page template fails to render."""
