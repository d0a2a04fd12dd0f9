import os

from .exceptions import ConfigurationError


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number of seconds, got '{raw}'.") from exc


REDIS_URL = os.environ.get("REDIS_URL", "redis://127.0.0.1:6379")
REDIS_KEY_PREFIX = os.environ.get("RESOURCE_REDIS_PREFIX", "resource:")

S3_BUCKET = os.environ.get("RESOURCE_S3_BUCKET") or None

URL_TIMEOUT_SECONDS = _float_env("RESOURCE_URL_TIMEOUT", 30.0)

# Schemes urllib.request can open out of the box.
SUPPORTED_URL_SCHEMES = frozenset({"http", "https", "ftp", "file"})
