"""
Domain exceptions for the aWATTar price client.
Provides clear, typed exceptions for every way a price query can fail.
"""

from typing import Optional


class AwattarException(Exception):
    """Base exception for all aWATTar client errors."""
    pass


class TransportError(AwattarException):
    """Raised when the HTTP request cannot complete (connection failure, timeout)."""
    pass


class HttpStatusError(AwattarException):
    """Raised when the API answers with a non-success status code."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        message = f"API responded with HTTP {status_code}"
        if url:
            message = f"{message} for {url}"
        super().__init__(message)


class DecodeError(AwattarException):
    """Raised when the response body is not JSON or does not match the expected schema."""
    pass


class UnsupportedUnitError(DecodeError):
    """Raised when a price item uses a unit other than Eur/MWh."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"Unsupported unit {unit!r}")
