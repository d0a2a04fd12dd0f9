from __future__ import annotations

import importlib.machinery
import pathlib
from typing import IO, Optional, Set, Union
from urllib.parse import urlparse

from .base import ResourceAccessor, collect_entries, source_finder


class FileSystemResourceAccessor(ResourceAccessor):
    """Opens resources from the local filesystem below ``base_dir``."""

    def __init__(self, base_dir: Union[str, pathlib.Path, None] = None) -> None:
        self._base_dir = pathlib.Path(base_dir) if base_dir is not None else pathlib.Path.cwd()

    @property
    def base_dir(self) -> pathlib.Path:
        return self._base_dir

    def resolve(self, path: str) -> pathlib.Path:
        parsed = urlparse(path)
        if parsed.scheme == "file":
            return pathlib.Path(parsed.path)
        return self._base_dir / path

    def get_resources_as_stream(self, path: str) -> Set[IO[bytes]]:
        if path is None:
            raise TypeError("path must not be None")
        resolved = self.resolve(path)
        if not resolved.is_file():
            return set()
        return {resolved.open("rb")}

    def list(
        self,
        relative_to: Optional[str],
        path: str,
        include_files: bool,
        include_directories: bool,
        recursive: bool,
    ) -> Optional[Set[str]]:
        if relative_to:
            anchor = self.resolve(relative_to)
            if not anchor.is_dir():
                anchor = anchor.parent
            directory = anchor / path
        else:
            directory = self.resolve(path)

        if not directory.is_dir():
            return None

        try:
            relative = directory.resolve().relative_to(self._base_dir.resolve()).as_posix()
            prefix = "" if relative == "." else f"{relative}/"
        except ValueError:
            # Outside base_dir; report absolute names.
            prefix = f"{directory.resolve().as_posix().rstrip('/')}/"

        return collect_entries(directory, prefix, include_files, include_directories, recursive)

    def to_class_loader(self) -> importlib.machinery.FileFinder:
        return source_finder(str(self._base_dir))
