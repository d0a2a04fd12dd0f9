from __future__ import annotations

from typing import IO, Any, Iterable, List, Optional, Set

from .base import ResourceAccessError, ResourceAccessor


class CompositeLoader:
    """Finds module specs through several loaders, first match wins."""

    def __init__(self, loaders: Iterable[Any]) -> None:
        self.loaders: List[Any] = list(loaders)

    def find_spec(self, fullname: str, *_args):
        for loader in self.loaders:
            find_spec = getattr(loader, "find_spec", None)
            if find_spec is None:
                continue
            spec = find_spec(fullname)
            if spec is not None:
                return spec
        return None


class CompositeResourceAccessor(ResourceAccessor):
    """Delegates to the first accessor that finds something."""

    def __init__(self, accessors: Iterable[ResourceAccessor]) -> None:
        self._accessors: List[ResourceAccessor] = list(accessors)

    @property
    def accessors(self) -> List[ResourceAccessor]:
        return list(self._accessors)

    def add(self, accessor: ResourceAccessor) -> None:
        self._accessors.append(accessor)

    def get_resources_as_stream(self, path: str) -> Set[IO[bytes]]:
        for accessor in self._accessors:
            streams = accessor.get_resources_as_stream(path)
            if streams is None:
                raise ResourceAccessError(
                    f"{type(accessor).__name__} returned None for '{path}'; expected a set."
                )
            if streams:
                return streams
        return set()

    def list(
        self,
        relative_to: Optional[str],
        path: str,
        include_files: bool,
        include_directories: bool,
        recursive: bool,
    ) -> Optional[Set[str]]:
        for accessor in self._accessors:
            entries = accessor.list(relative_to, path, include_files, include_directories, recursive)
            if entries:
                return entries
        return None

    def to_class_loader(self) -> CompositeLoader:
        loaders = (accessor.to_class_loader() for accessor in self._accessors)
        return CompositeLoader(loader for loader in loaders if loader is not None)
