"""Core components for the Resource Provider SDK.

Failure classification and HTTP execution shared by the remote backend.
"""

from __future__ import annotations

from .errors import ErrorFactory
from .http_executor import (
    EXPECT_CREATED,
    EXPECT_OK,
    AsyncHTTPExecutor,
    JsonResponse,
    ResponseExpectation,
)

__all__ = [
    "ErrorFactory",
    "AsyncHTTPExecutor",
    "JsonResponse",
    "ResponseExpectation",
    "EXPECT_OK",
    "EXPECT_CREATED",
]
