"""Centralized error factory for the Resource Provider SDK.

Provides consistent classification of transport and response failures into
the SDK error hierarchy.
"""

from __future__ import annotations

import uuid

import httpx

from ..errors import (
    ConnectionFailedError,
    RequestTimeoutError,
    ResourceProviderError,
    TransportFailureError,
    UnexpectedContentTypeError,
    UnexpectedStatusError,
)


class ErrorFactory:
    """Centralized error creation with consistent structure.

    All errors created through this factory include:
    - Standardized error codes
    - A correlation ID for tracing
    - The originating exception as ``__cause__`` where there is one
    """

    @staticmethod
    def generate_correlation_id() -> str:
        """Generate a unique correlation ID."""
        return str(uuid.uuid4())

    @staticmethod
    def from_exception(
        exc: BaseException,
        *,
        correlation_id: str | None = None,
    ) -> ResourceProviderError:
        """Create SDK error from exception.

        Args:
            exc: Original exception.
            correlation_id: Optional correlation ID for tracing.

        Returns:
            Appropriate ResourceProviderError subclass.
        """
        correlation_id = correlation_id or ErrorFactory.generate_correlation_id()

        if isinstance(exc, ResourceProviderError):
            # Already an SDK error, just ensure correlation ID
            if exc.correlation_id is None:
                exc.correlation_id = correlation_id
            return exc

        if isinstance(exc, httpx.TimeoutException):
            return RequestTimeoutError(
                f"Request timed out: {exc}",
                correlation_id=correlation_id,
                cause=exc,
            )

        if isinstance(exc, httpx.ConnectError):
            return ConnectionFailedError(
                f"Connection failed: {exc}",
                correlation_id=correlation_id,
                cause=exc,
            )

        if isinstance(exc, httpx.HTTPError):
            return TransportFailureError(
                f"HTTP error: {exc}",
                correlation_id=correlation_id,
                cause=exc,
            )

        return TransportFailureError(
            f"Unexpected error: {exc}",
            correlation_id=correlation_id,
            cause=exc,
        )

    @staticmethod
    def unexpected_status(
        response: httpx.Response,
        expected: int,
        *,
        correlation_id: str | None = None,
    ) -> UnexpectedStatusError:
        """Create error for a response whose status is not the expected one."""
        return UnexpectedStatusError(
            expected,
            response.status_code,
            correlation_id=correlation_id or ErrorFactory.generate_correlation_id(),
        )

    @staticmethod
    def unexpected_content_type(
        response: httpx.Response,
        *,
        correlation_id: str | None = None,
    ) -> UnexpectedContentTypeError:
        """Create error for a response that is not a JSON document."""
        return UnexpectedContentTypeError(
            response.headers.get("content-type"),
            status_code=response.status_code,
            correlation_id=correlation_id or ErrorFactory.generate_correlation_id(),
        )
