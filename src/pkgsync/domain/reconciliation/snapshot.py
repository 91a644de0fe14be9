"""Inventory snapshot of the dependency manager's installed packages."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from pkgsync.domain.model import InventoryEntry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pkgsync.domain.model import PackageDescriptor


class InventorySnapshot(Mapping[str, Path]):
    """Ordered, read-only mapping from package name to install path."""

    __slots__ = ("_paths",)

    def __init__(self, paths: Mapping[str, Path] | None = None) -> None:
        self._paths: dict[str, Path] = {name: Path(path) for name, path in (paths or {}).items()}

    def __getitem__(self, name: str) -> Path:
        return self._paths[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __repr__(self) -> str:
        return f"InventorySnapshot({self._paths!r})"

    def entries(self) -> Iterator[InventoryEntry]:
        for name, install_path in self._paths.items():
            yield InventoryEntry(name=name, install_path=install_path)


def build_snapshot(descriptors: Iterable[PackageDescriptor]) -> InventorySnapshot:
    """Resolve aliases and drop metapackages from the dependency manager's list.

    Entries keep the order in which their name was first seen. A package listed
    more than once (for example directly and through an alias) keeps its first
    position and its last reported path.
    """

    paths: dict[str, Path] = {}
    for descriptor in descriptors:
        package = descriptor.resolve()
        # metapackages
        if package.install_path is None:
            continue
        paths[package.name] = package.install_path
    return InventorySnapshot(paths)
