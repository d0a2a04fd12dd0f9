"""URL-aware resource accessors for migration change logs."""

from .accessors import (
    CompositeResourceAccessor,
    FileSystemResourceAccessor,
    PackageResourceAccessor,
    ResourceAccessor,
    UrlFallback,
    UrlResourceAccessor,
)
from .exceptions import ConfigurationError, ResourceAccessError, ResourceAccessorError

__all__ = [
    "CompositeResourceAccessor",
    "FileSystemResourceAccessor",
    "PackageResourceAccessor",
    "ResourceAccessor",
    "UrlFallback",
    "UrlResourceAccessor",
    "ConfigurationError",
    "ResourceAccessError",
    "ResourceAccessorError",
]
