"""Exception classes for the proxy services.

This module defines a hierarchy of exception classes for handling
request validation failures and errors raised while talking to the
upstream data providers. Each class knows the HTTP status the web layer
answers with.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional


class ProxyError(Exception):
    """Error while serving a proxied request.

    Raised when a request is invalid, when an upstream lookup finds
    nothing, or when the provider cannot be reached or answers with
    something unusable. Includes the provider response when available.
    """

    http_status: ClassVar[int] = 500

    def __init__(
        self, code: int, message: str, response: Optional[Dict[str, Any]] = None
    ) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code or custom error code
            message: Human-readable error message
            response: Optional raw provider response for debugging
        """
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.message: str = message
        self.response: Optional[Dict[str, Any]] = response

    @property
    def is_client_error(self) -> bool:
        """Check if this is a client-side error (4xx).

        Returns:
            True for 400-499 status codes
        """
        return 400 <= self.code < 500

    @property
    def is_server_error(self) -> bool:
        """Check if this is a server-side error (5xx).

        Returns:
            True for 500-599 status codes
        """
        return self.code >= 500

    @classmethod
    def from_status(
        cls,
        status_code: int,
        message: str,
        response: Optional[Dict[str, Any]] = None,
    ) -> ProxyError:
        """Create an error from a provider's non-2xx answer.

        Args:
            status_code: HTTP status code returned by the provider
            message: Message extracted from the provider response
            response: Optional decoded provider body

        Returns:
            Appropriate ProxyError subclass
        """
        if status_code == 404:
            return NotFoundError(message, response)
        return ProviderError(status_code, message, response)


class ValidationError(ProxyError):
    """Raised when a required query or path parameter is missing."""

    http_status = 400

    def __init__(self, message: str) -> None:
        super().__init__(400, message)


class NotFoundError(ProxyError):
    """Raised when an upstream lookup yields no result."""

    http_status = 404

    def __init__(
        self, message: str, response: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(404, message, response)


class UpstreamError(ProxyError):
    """Raised when a provider fails or returns an unusable response."""

    http_status = 500


class NetworkError(UpstreamError):
    """Raised when a network issue prevents provider communication."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with network error details.

        Args:
            message: Description of the network error
            original_error: The original exception that was caught
        """
        super().__init__(0, message)
        self.original_error = original_error


class ProviderError(UpstreamError):
    """Raised when a provider answers with a non-2xx status."""

    pass


class ParseError(UpstreamError):
    """Raised when provider response parsing fails."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with parsing error details.

        Args:
            message: Description of the parsing error
            original_error: The original exception that was caught
        """
        super().__init__(0, message)
        self.original_error = original_error
