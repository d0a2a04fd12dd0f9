from .base import ResourceAccessor, ResourceAccessError
from .composite import CompositeLoader, CompositeResourceAccessor
from .file import FileSystemResourceAccessor
from .package import PackageResourceAccessor
from .url import UrlFallback, UrlResourceAccessor, is_url

__all__ = [
    "ResourceAccessor",
    "ResourceAccessError",
    "CompositeLoader",
    "CompositeResourceAccessor",
    "FileSystemResourceAccessor",
    "PackageResourceAccessor",
    "UrlFallback",
    "UrlResourceAccessor",
    "is_url",
]
