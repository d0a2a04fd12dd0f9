from __future__ import annotations

import posixpath
from typing import IO, Optional, Set, Tuple
from urllib.parse import urlparse

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..constants import S3_BUCKET
from .base import ResourceAccessError, ResourceAccessor

_MISSING_CODES = {"NoSuchKey", "404", "NotFound"}


class S3ResourceAccessor(ResourceAccessor):
    """Opens resources stored in S3 buckets."""

    def __init__(self, bucket: Optional[str] = None, prefix: str = "", client=None) -> None:
        self._bucket = bucket or S3_BUCKET
        self._prefix = prefix.strip("/")
        self._client = client or boto3.client("s3")

    def _locate(self, path: str) -> Tuple[str, str]:
        parsed = urlparse(path)
        if parsed.scheme == "s3":
            bucket = parsed.netloc
            key = parsed.path.lstrip("/")
            if not bucket or not key:
                raise ResourceAccessError(f"Invalid S3 URI '{path}'.")
            return bucket, key

        if not self._bucket:
            raise ResourceAccessError(f"No S3 bucket configured to resolve '{path}'.")
        key = path.lstrip("/")
        if self._prefix:
            key = f"{self._prefix}/{key}"
        return self._bucket, key

    def get_resources_as_stream(self, path: str) -> Set[IO[bytes]]:
        if path is None:
            raise TypeError("path must not be None")
        bucket, key = self._locate(path)
        try:
            response = self._client.get_object(Bucket=bucket, Key=key)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in _MISSING_CODES:
                return set()
            raise ResourceAccessError(f"Failed to fetch '{path}' from S3.") from exc
        except BotoCoreError as exc:  # pragma: no cover - network error cases
            raise ResourceAccessError(f"Failed to fetch '{path}' from S3.") from exc
        return {response["Body"]}

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
        bucket, key = self._locate(target)
        list_prefix = key.rstrip("/")
        list_prefix = f"{list_prefix}/" if list_prefix else ""
        strip = len(self._prefix) + 1 if self._prefix and urlparse(target).scheme != "s3" else 0

        params = {"Bucket": bucket, "Prefix": list_prefix}
        if not recursive:
            params["Delimiter"] = "/"

        entries: Set[str] = set()
        try:
            paginator = self._client.get_paginator("list_objects_v2")
            for page in paginator.paginate(**params):
                for item in page.get("Contents", []):
                    name = item["Key"][strip:]
                    if name.endswith("/"):
                        if include_directories:
                            entries.add(name)
                        continue
                    if include_files:
                        entries.add(name)
                    if recursive and include_directories:
                        entries.update(_parent_directories(name, list_prefix[strip:]))
                if include_directories:
                    for common in page.get("CommonPrefixes", []):
                        entries.add(common["Prefix"][strip:])
        except (ClientError, BotoCoreError) as exc:
            raise ResourceAccessError(f"Failed to list '{path}' in S3.") from exc

        return entries or None

    def to_class_loader(self) -> None:
        return None


def _parent_directories(name: str, root: str) -> Set[str]:
    """Return the implied directories between ``root`` and ``name``."""
    directories = set()
    remainder = name[len(root):].split("/")[:-1]
    current = root
    for part in remainder:
        current = f"{current}{part}/"
        directories.add(current)
    return directories
