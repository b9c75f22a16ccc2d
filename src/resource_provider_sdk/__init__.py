"""Resource Provider SDK.

Uniform asynchronous access to resources held in a bundled static
configuration or behind a tenant-scoped, token-authenticated HTTP API.
"""

from .config import (
    ProviderSettings,
    RemoteProviderConfig,
    StaticProviderConfig,
    TelemetryConfig,
)
from .errors import (
    ConnectionFailedError,
    ErrorCode,
    InvalidConfigError,
    InvalidResponseBodyError,
    RequestTimeoutError,
    ResourceProviderError,
    TransportFailureError,
    UnexpectedContentTypeError,
    UnexpectedStatusError,
    UnsupportedOperationError,
)
from .factory import create_resource_provider
from .models import RequestDescriptor, Resource
from .providers import RemoteResourceProvider, ResourceProvider, StaticResourceProvider

__all__ = [
    "ProviderSettings",
    "RemoteProviderConfig",
    "StaticProviderConfig",
    "TelemetryConfig",
    "ConnectionFailedError",
    "ErrorCode",
    "InvalidConfigError",
    "InvalidResponseBodyError",
    "RequestTimeoutError",
    "ResourceProviderError",
    "TransportFailureError",
    "UnexpectedContentTypeError",
    "UnexpectedStatusError",
    "UnsupportedOperationError",
    "create_resource_provider",
    "RequestDescriptor",
    "Resource",
    "RemoteResourceProvider",
    "ResourceProvider",
    "StaticResourceProvider",
]

__version__ = "0.1.0"
