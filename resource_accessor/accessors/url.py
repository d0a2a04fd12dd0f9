from __future__ import annotations

import enum
import http.client
import logging
import urllib.request
from typing import IO, Any, Optional, Set
from urllib.error import URLError
from urllib.parse import urlparse

from ..constants import SUPPORTED_URL_SCHEMES, URL_TIMEOUT_SECONDS
from .base import ResourceAccessor

LOGGER = logging.getLogger(__name__)


class UrlFallback(enum.Enum):
    """What to do with a path that is not a well-formed URL."""

    EMPTY = "empty"
    DELEGATE = "delegate"


def is_url(path: str) -> bool:
    """Return True when ``path`` is a URL literal that urllib can open.

    Single-letter schemes are rejected so that Windows drive paths such as
    ``C:\\changelog.xml`` are not mistaken for URLs. A non-numeric or
    out-of-range port makes the URL malformed.
    """
    try:
        parsed = urlparse(path)
        parsed.port
    except ValueError:
        return False
    return len(parsed.scheme) > 1 and parsed.scheme in SUPPORTED_URL_SCHEMES


class UrlResourceAccessor(ResourceAccessor):
    """Opens URL paths directly and delegates everything else.

    The composite accessor treats a None result from any constituent as a
    broken contract, so :meth:`get_resources_as_stream` always returns a set,
    falling back to an empty one.
    """

    def __init__(
        self,
        delegate: ResourceAccessor,
        fallback: UrlFallback = UrlFallback.DELEGATE,
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if delegate is None:
            raise ValueError("delegate must not be None")
        self._delegate = delegate
        self._fallback = UrlFallback(fallback)
        self._timeout = URL_TIMEOUT_SECONDS if timeout is None else timeout
        self.logger = logger or LOGGER

    @property
    def delegate(self) -> ResourceAccessor:
        return self._delegate

    @property
    def fallback(self) -> UrlFallback:
        return self._fallback

    def get_resources_as_stream(self, path: str) -> Set[IO[bytes]]:
        if path is None:
            raise TypeError("path must not be None")

        if is_url(path):
            # OSError (URLError, HTTPError, missing file: targets) propagates.
            try:
                stream = urllib.request.urlopen(path, timeout=self._timeout)  # nosec B310 (intended usage)
            except http.client.InvalidURL as exc:
                raise URLError(exc) from exc
            self.logger.debug("Opened resource stream", extra={"url": path})
            return {stream}

        if self._fallback is UrlFallback.EMPTY:
            self.logger.debug("Path is not a URL; no resource found", extra={"path": path})
            return set()

        self.logger.debug("Path is not a URL; delegating", extra={"path": path})
        streams = self._delegate.get_resources_as_stream(path)
        if not streams:
            return set()
        return streams

    def list(
        self,
        relative_to: Optional[str],
        path: str,
        include_files: bool,
        include_directories: bool,
        recursive: bool,
    ) -> Optional[Set[str]]:
        if self._fallback is UrlFallback.EMPTY:
            return None
        return self._delegate.list(relative_to, path, include_files, include_directories, recursive)

    def to_class_loader(self) -> Optional[Any]:
        return self._delegate.to_class_loader()
