"""Resource provider backends."""

from .base import ResourceProvider
from .remote import RemoteResourceProvider
from .static import StaticResourceProvider

__all__ = [
    "ResourceProvider",
    "RemoteResourceProvider",
    "StaticResourceProvider",
]
