from typing import Optional


class GDPGraphError(Exception):
    """Base class for every failure raised while loading the chart."""


class NetworkError(GDPGraphError):
    """The data request failed or came back with a non-success status."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(GDPGraphError):
    """The response body or one of its date strings could not be parsed."""
