class AIVIError(Exception):
    """Base class for every error raised by the AIVI client."""


class TransportError(AIVIError):
    """A request to the AIVI service did not produce a usable response."""

    def __init__(self, message, url=None):
        super().__init__(message)
        self.url = url


class NetworkError(TransportError):
    """The service could not be reached (connection refused, DNS, timeout)."""


class ServerError(TransportError):
    """The service answered with a 4xx or 5xx status."""

    def __init__(self, status, url=None, body=""):
        super().__init__(f"Server error: {status}", url=url)
        self.status = status
        self.body = body


class DecodeError(TransportError):
    """The response body could not be read or decoded."""
