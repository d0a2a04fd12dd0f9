from __future__ import annotations

import importlib.machinery
from abc import ABC, abstractmethod
from typing import IO, Any, Optional, Set

from ..exceptions import ResourceAccessError

__all__ = ["ResourceAccessor", "ResourceAccessError", "collect_entries", "source_finder"]


class ResourceAccessor(ABC):
    """Interface for locating and opening named resources.

    Streams returned by :meth:`get_resources_as_stream` are open and owned by
    the caller, who is responsible for closing them.
    """

    @abstractmethod
    def get_resources_as_stream(self, path: str) -> Set[IO[bytes]]:
        """Return open binary streams for every resource ``path`` designates."""

    @abstractmethod
    def list(
        self,
        relative_to: Optional[str],
        path: str,
        include_files: bool,
        include_directories: bool,
        recursive: bool,
    ) -> Optional[Set[str]]:
        """Return the resource names found under ``path``, or None."""

    @abstractmethod
    def to_class_loader(self) -> Optional[Any]:
        """Return the import loader matching this accessor's resource root."""


def collect_entries(
    directory: Any,
    prefix: str,
    include_files: bool,
    include_directories: bool,
    recursive: bool,
) -> Set[str]:
    """Collect entry names below ``directory``.

    ``directory`` may be a :class:`pathlib.Path` or an
    :mod:`importlib.resources` traversable. Names are ``prefix`` joined with
    the POSIX-style relative path; directories end with ``/``.
    """
    entries: Set[str] = set()
    for child in directory.iterdir():
        name = f"{prefix}{child.name}"
        if child.is_dir():
            if include_directories:
                entries.add(f"{name}/")
            if recursive:
                entries.update(
                    collect_entries(child, f"{name}/", include_files, include_directories, recursive)
                )
        elif include_files and child.is_file():
            entries.add(name)
    return entries


def source_finder(directory: str) -> importlib.machinery.FileFinder:
    """Return a finder that imports source modules from ``directory``."""
    loader_details = (importlib.machinery.SourceFileLoader, importlib.machinery.SOURCE_SUFFIXES)
    return importlib.machinery.FileFinder(directory, loader_details)
