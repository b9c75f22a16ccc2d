"""Centralized HTTP execution for the Resource Provider SDK.

Sends a single request, checks the response against an expectation and
decodes the JSON body. Failures are classified through ``ErrorFactory``;
nothing here retries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from ..errors import InvalidResponseBodyError
from ..http import is_json_content_type
from ..telemetry import trace_operation
from .errors import ErrorFactory


@dataclass(frozen=True)
class ResponseExpectation:
    """What a response must look like to count as a success."""

    status_code: int
    json_body: bool = True


EXPECT_OK = ResponseExpectation(status_code=httpx.codes.OK)
EXPECT_CREATED = ResponseExpectation(status_code=httpx.codes.CREATED)


@dataclass(frozen=True)
class JsonResponse:
    """A response that met its expectation, with the decoded body."""

    status_code: int
    headers: httpx.Headers
    body: dict[str, Any] | None


class AsyncHTTPExecutor:
    """Asynchronous single-attempt HTTP executor with response expectations."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize async HTTP executor.

        Args:
            client: Async HTTP client, possibly shared with other components.
        """
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the underlying transport handle."""
        return self._client

    async def execute(
        self,
        method: str,
        url: str,
        expectation: ResponseExpectation,
        *,
        correlation_id: str | None = None,
        **kwargs: Any,
    ) -> JsonResponse:
        """Execute an HTTP request and enforce the expectation.

        Args:
            method: HTTP method.
            url: Absolute request URL.
            expectation: Required status and content type.
            correlation_id: Optional correlation ID attached to errors.
            **kwargs: Additional request arguments (headers, json, ...).

        Returns:
            The checked response with its decoded JSON body.

        Raises:
            TransportFailureError: On connection failure, timeout, a request
                that cannot be built or sent, or a response that does not meet
                the expectation.
        """
        correlation_id = correlation_id or ErrorFactory.generate_correlation_id()

        with trace_operation(
            "resource_request",
            attributes={"http.method": method, "http.url": url},
        ) as span:
            try:
                response = await self._client.request(method, url, **kwargs)
            except Exception as e:
                raise ErrorFactory.from_exception(e, correlation_id=correlation_id) from e

            span.set_attribute("http.status_code", response.status_code)

            if response.status_code != expectation.status_code:
                raise ErrorFactory.unexpected_status(
                    response,
                    expectation.status_code,
                    correlation_id=correlation_id,
                )

            if not expectation.json_body:
                return JsonResponse(response.status_code, response.headers, None)

            if not is_json_content_type(response.headers.get("content-type")):
                raise ErrorFactory.unexpected_content_type(
                    response,
                    correlation_id=correlation_id,
                )

            body = _decode_json_object(response, correlation_id)
            return JsonResponse(response.status_code, response.headers, body)


def _decode_json_object(
    response: httpx.Response,
    correlation_id: str,
) -> dict[str, Any]:
    """Decode the response body, which must be a JSON object."""
    try:
        body = response.json()
    except (ValueError, RecursionError) as e:
        raise InvalidResponseBodyError(
            f"Response body is not valid JSON: {e}",
            status_code=response.status_code,
            correlation_id=correlation_id,
            cause=e,
        ) from e

    if not isinstance(body, dict):
        raise InvalidResponseBodyError(
            f"Expected a JSON object but received {type(body).__name__}",
            status_code=response.status_code,
            correlation_id=correlation_id,
        )
    return body
