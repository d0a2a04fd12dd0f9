from __future__ import annotations

import io
import logging
import posixpath
from typing import IO, Optional, Set, Union

from redis import Redis

from ..constants import REDIS_KEY_PREFIX, REDIS_URL
from .base import ResourceAccessor

LOGGER = logging.getLogger(__name__)


def create_redis(url: str = REDIS_URL) -> Redis:
    # Resource bodies are binary, so responses are left undecoded.
    return Redis.from_url(url)


class RedisResourceAccessor(ResourceAccessor):
    """Serves resources cached as Redis string keys named ``<prefix><path>``."""

    def __init__(self, client: Optional[Redis] = None, key_prefix: str = REDIS_KEY_PREFIX) -> None:
        self._client = client if client is not None else create_redis()
        self._key_prefix = key_prefix

    def _key(self, path: str) -> str:
        return f"{self._key_prefix}{path.lstrip('/')}"

    def put(self, path: str, data: Union[bytes, str]) -> None:
        if isinstance(data, str):
            data = data.encode("UTF-8")
        self._client.set(self._key(path), data)
        LOGGER.debug("Stored resource", extra={"key": self._key(path), "size": len(data)})

    def get_resources_as_stream(self, path: str) -> Set[IO[bytes]]:
        if path is None:
            raise TypeError("path must not be None")
        value = self._client.get(self._key(path))
        if value is None:
            return set()
        if isinstance(value, str):
            value = value.encode("UTF-8")
        return {io.BytesIO(value)}

    def list(
        self,
        relative_to: Optional[str],
        path: str,
        include_files: bool,
        include_directories: bool,
        recursive: bool,
    ) -> Optional[Set[str]]:
        target = path
        if relative_to:
            target = posixpath.join(posixpath.dirname(relative_to), path)
        root = target.strip("/")
        root = f"{root}/" if root else ""
        pattern = f"{self._key(root)}*"

        entries: Set[str] = set()
        for raw_key in self._client.scan_iter(match=pattern):
            key = raw_key.decode("UTF-8") if isinstance(raw_key, bytes) else raw_key
            name = key[len(self._key_prefix):]
            parts = name[len(root):].split("/")
            if not recursive and len(parts) > 1:
                if include_directories:
                    entries.add(f"{root}{parts[0]}/")
                continue
            if include_files:
                entries.add(name)
            if include_directories:
                current = root
                for part in parts[:-1]:
                    current = f"{current}{part}/"
                    entries.add(current)

        return entries or None

    def to_class_loader(self) -> None:
        return None
