"""Error classes for the Resource Provider SDK.

Implements a structured error hierarchy with error codes and correlation IDs
so failures can be logged and traced consistently across backends.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the Resource Provider SDK."""

    # Backend capability errors (1xxx)
    UNSUPPORTED_OPERATION = "RES_1001"

    # Validation errors (2xxx)
    INVALID_CONFIG = "VAL_2002"

    # Transport errors (3xxx)
    TRANSPORT_FAILURE = "NET_3001"
    TIMEOUT_ERROR = "NET_3002"
    CONNECTION_ERROR = "NET_3003"

    # Response expectation errors (4xxx)
    UNEXPECTED_STATUS = "HTTP_4001"
    UNEXPECTED_CONTENT_TYPE = "HTTP_4002"
    INVALID_BODY = "HTTP_4003"


class ResourceProviderError(Exception):
    """Base error for the Resource Provider SDK with structured error information."""

    def __init__(
        self,
        message: str,
        code: ErrorCode | str,
        *,
        status_code: int | None = None,
        correlation_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if isinstance(code, str) else code.value
        self.status_code = status_code
        self.correlation_id = correlation_id
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "correlation_id": self.correlation_id,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class UnsupportedOperationError(ResourceProviderError, NotImplementedError):
    """Operation is not offered by this backend."""

    def __init__(
        self,
        operation: str,
        *,
        provider: str | None = None,
    ) -> None:
        target = f" by {provider}" if provider else ""
        super().__init__(
            f"Operation '{operation}' is not supported{target}",
            ErrorCode.UNSUPPORTED_OPERATION,
            details={"operation": operation, "provider": provider},
        )
        self.operation = operation
        self.provider = provider


class InvalidConfigError(ResourceProviderError):
    """Invalid SDK configuration."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.INVALID_CONFIG,
            details={"field": field} if field else None,
        )


class TransportFailureError(ResourceProviderError):
    """Remote call failed at the connection or protocol-expectation level."""

    def __init__(
        self,
        message: str = "Remote request failed",
        code: ErrorCode | str = ErrorCode.TRANSPORT_FAILURE,
        *,
        status_code: int | None = None,
        correlation_id: str | None = None,
        details: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        merged = dict(details or {})
        if cause is not None:
            merged.setdefault("cause", str(cause))
        super().__init__(
            message,
            code,
            status_code=status_code,
            correlation_id=correlation_id,
            details=merged,
        )
        self.__cause__ = cause


class ConnectionFailedError(TransportFailureError):
    """Could not connect to the remote service."""

    def __init__(
        self,
        message: str = "Connection failed",
        *,
        correlation_id: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.CONNECTION_ERROR,
            correlation_id=correlation_id,
            cause=cause,
        )


class RequestTimeoutError(TransportFailureError):
    """Request timed out in the underlying transport."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        correlation_id: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.TIMEOUT_ERROR,
            status_code=408,
            correlation_id=correlation_id,
            cause=cause,
        )


class UnexpectedStatusError(TransportFailureError):
    """Response status did not match the expected status."""

    def __init__(
        self,
        expected: int,
        actual: int,
        *,
        correlation_id: str | None = None,
    ) -> None:
        super().__init__(
            f"Expected status {expected} but received {actual}",
            ErrorCode.UNEXPECTED_STATUS,
            status_code=actual,
            correlation_id=correlation_id,
            details={"expected_status": expected, "actual_status": actual},
        )
        self.expected = expected
        self.actual = actual


class UnexpectedContentTypeError(TransportFailureError):
    """Response content type was not JSON."""

    def __init__(
        self,
        content_type: str | None,
        *,
        status_code: int | None = None,
        correlation_id: str | None = None,
    ) -> None:
        super().__init__(
            f"Expected a JSON response but received content type {content_type!r}",
            ErrorCode.UNEXPECTED_CONTENT_TYPE,
            status_code=status_code,
            correlation_id=correlation_id,
            details={"content_type": content_type},
        )
        self.content_type = content_type


class InvalidResponseBodyError(TransportFailureError):
    """Response body could not be decoded into a JSON object."""

    def __init__(
        self,
        message: str = "Response body is not a JSON object",
        *,
        status_code: int | None = None,
        correlation_id: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.INVALID_BODY,
            status_code=status_code,
            correlation_id=correlation_id,
            cause=cause,
        )
