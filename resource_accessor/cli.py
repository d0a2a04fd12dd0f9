"""Local entry point to open and list resources through the accessors."""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from typing import List, Optional, Sequence

from .accessors import (
    CompositeResourceAccessor,
    FileSystemResourceAccessor,
    ResourceAccessor,
    UrlFallback,
    UrlResourceAccessor,
)
from .accessors.redis import RedisResourceAccessor, create_redis
from .accessors.s3 import S3ResourceAccessor
from .exceptions import ResourceAccessorError

LOGGER = logging.getLogger("resource-accessor.cli")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Open or list resources, resolving URLs directly")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--base-dir", default=None, help="Filesystem root for relative paths")
    parser.add_argument(
        "--fallback",
        choices=[mode.value for mode in UrlFallback],
        default=UrlFallback.DELEGATE.value,
        help="Behaviour for paths that are not URLs",
    )
    parser.add_argument("--redis-url", default=None, help="Also look up resources cached in Redis")
    parser.add_argument("--s3-bucket", default=None, help="Also look up resources in this S3 bucket")
    parser.add_argument("--s3-prefix", default="", help="Key prefix inside the S3 bucket")

    subparsers = parser.add_subparsers(dest="command", required=True)

    open_parser = subparsers.add_parser("open", help="Write the resource contents to stdout")
    open_parser.add_argument("path")

    list_parser = subparsers.add_parser("list", help="List resources below a path")
    list_parser.add_argument("path")
    list_parser.add_argument("--relative-to", default=None)
    list_parser.add_argument("--no-files", dest="include_files", action="store_false")
    list_parser.add_argument("--no-directories", dest="include_directories", action="store_false")
    list_parser.add_argument("--recursive", action="store_true")

    return parser.parse_args(argv)


def build_accessor(args: argparse.Namespace) -> UrlResourceAccessor:
    accessors: List[ResourceAccessor] = [FileSystemResourceAccessor(args.base_dir)]
    if args.redis_url:
        accessors.append(RedisResourceAccessor(create_redis(args.redis_url)))
    if args.s3_bucket:
        accessors.append(S3ResourceAccessor(bucket=args.s3_bucket, prefix=args.s3_prefix))

    delegate: ResourceAccessor = accessors[0] if len(accessors) == 1 else CompositeResourceAccessor(accessors)
    return UrlResourceAccessor(delegate, fallback=UrlFallback(args.fallback), logger=LOGGER)


def _open(accessor: ResourceAccessor, path: str) -> int:
    streams = accessor.get_resources_as_stream(path)
    if not streams:
        LOGGER.error("Resource not found: %s", path)
        return 1
    out = sys.stdout.buffer
    for stream in streams:
        with stream:
            shutil.copyfileobj(stream, out)
    out.flush()
    return 0


def _list(accessor: ResourceAccessor, args: argparse.Namespace) -> int:
    entries = accessor.list(
        args.relative_to,
        args.path,
        args.include_files,
        args.include_directories,
        args.recursive,
    )
    for entry in sorted(entries or ()):
        print(entry)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        accessor = build_accessor(args)
        if args.command == "open":
            return _open(accessor, args.path)
        return _list(accessor, args)
    except (OSError, ResourceAccessorError) as exc:
        LOGGER.error("%s failed for %s: %s", args.command, args.path, exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
