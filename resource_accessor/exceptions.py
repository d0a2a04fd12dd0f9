class ResourceAccessorError(Exception):
    """Base class for resource accessor errors."""


class ResourceAccessError(ResourceAccessorError, RuntimeError):
    """Raised when a resource cannot be retrieved for reasons other than plain I/O."""


class ConfigurationError(ResourceAccessorError):
    """Raised when an accessor is configured with unusable settings."""
