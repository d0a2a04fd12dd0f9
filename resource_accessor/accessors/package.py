from __future__ import annotations

import importlib
import importlib.resources
from pathlib import Path, PurePosixPath
from types import ModuleType
from typing import IO, Any, Optional, Set, Union

from .base import ResourceAccessor, collect_entries, source_finder


class PackageResourceAccessor(ResourceAccessor):
    """Reads resources bundled inside an importable Python package."""

    def __init__(self, package: Union[str, ModuleType]) -> None:
        self._module = importlib.import_module(package) if isinstance(package, str) else package
        self._root = importlib.resources.files(self._module)

    def _traverse(self, parts: PurePosixPath) -> Any:
        node = self._root
        for part in parts.parts:
            if part in ("", "/", "."):
                continue
            node = node.joinpath(part)
        return node

    def get_resources_as_stream(self, path: str) -> Set[IO[bytes]]:
        if path is None:
            raise TypeError("path must not be None")
        node = self._traverse(PurePosixPath(path))
        if not node.is_file():
            return set()
        return {node.open("rb")}

    def list(
        self,
        relative_to: Optional[str],
        path: str,
        include_files: bool,
        include_directories: bool,
        recursive: bool,
    ) -> Optional[Set[str]]:
        target = PurePosixPath(path)
        if relative_to:
            anchor = PurePosixPath(relative_to)
            if not self._traverse(anchor).is_dir():
                anchor = anchor.parent
            target = anchor / target

        directory = self._traverse(target)
        if not directory.is_dir():
            return None

        relative = target.as_posix().strip("/")
        prefix = "" if relative in ("", ".") else f"{relative}/"
        return collect_entries(directory, prefix, include_files, include_directories, recursive)

    def to_class_loader(self) -> Optional[Any]:
        if isinstance(self._root, Path):
            return source_finder(str(self._root))
        # Zipped packages: zipimporter is itself a finder.
        spec = getattr(self._module, "__spec__", None)
        loader = spec.loader if spec is not None else None
        return loader if hasattr(loader, "find_spec") else None
