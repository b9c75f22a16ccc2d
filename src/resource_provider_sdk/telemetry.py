"""Logging and tracing for resource providers.

Loggers come from structlog and spans from the OpenTelemetry API. Nothing is
configured process-wide until ``configure_telemetry`` runs, so a host
application that sets up its own logging keeps control of it.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable, Mapping, MutableMapping
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Concatenate, ParamSpec, TypeVar

import structlog
from opentelemetry import trace

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .config import TelemetryConfig

P = ParamSpec("P")
T = TypeVar("T")

LOGGER_NAME = "resource-provider-sdk"
INSTRUMENTATION_VERSION = "0.1.0"

# Event keys whose values must never reach a log sink
SECRET_KEYS = frozenset({"token", "session_token", "x-okapi-token"})
REDACTED = "[redacted]"

_tracer: trace.Tracer | None = None
_logger: Any = None


def get_tracer() -> trace.Tracer:
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer(LOGGER_NAME, INSTRUMENTATION_VERSION)
    return _tracer


def get_logger() -> Any:
    """Return the shared provider logger (a lazy structlog proxy)."""
    global _logger
    if _logger is None:
        _logger = structlog.get_logger(LOGGER_NAME)
    return _logger


def redact_secrets(
    logger: Any,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """structlog processor masking session tokens in events and header maps."""
    for key in SECRET_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED

    headers = event_dict.get("headers")
    if isinstance(headers, Mapping):
        event_dict["headers"] = {
            name: REDACTED if name.lower() in SECRET_KEYS else value
            for name, value in headers.items()
        }
    return event_dict


def configure_telemetry(config: TelemetryConfig) -> None:
    """Install the SDK logging pipeline and tracer described by ``config``.

    A disabled config only swaps in a no-op tracer; log output is left to
    whatever the application configured.
    """
    global _tracer, _logger

    if not config.enabled:
        _tracer = trace.NoOpTracer()
        return

    min_level = logging.getLevelNamesMapping()[config.log_level]
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            redact_secrets,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    _tracer = trace.get_tracer(config.service_name, INSTRUMENTATION_VERSION)
    _logger = structlog.get_logger(LOGGER_NAME, service=config.service_name)


@contextmanager
def trace_operation(
    name: str,
    *,
    attributes: Mapping[str, Any] | None = None,
) -> Iterator[trace.Span]:
    """Run a block inside a span.

    An exception escaping the block is recorded on the span, which is marked
    ERROR, and then re-raised.
    """
    with get_tracer().start_as_current_span(
        name,
        attributes=dict(attributes or {}),
        record_exception=True,
        set_status_on_exception=True,
    ) as span:
        yield span


def traced_operation(
    name: str,
) -> Callable[
    [Callable[Concatenate[Any, P], Awaitable[T]]],
    Callable[Concatenate[Any, P], Awaitable[T]],
]:
    """Trace a provider coroutine method under ``name``.

    The span is tagged with the provider class and the operation name.
    """

    def decorator(
        func: Callable[Concatenate[Any, P], Awaitable[T]],
    ) -> Callable[Concatenate[Any, P], Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> T:
            attributes = {
                "resource.provider": type(self).__name__,
                "resource.operation": func.__name__,
            }
            with trace_operation(name, attributes=attributes):
                return await func(self, *args, **kwargs)

        return wrapper

    return decorator
