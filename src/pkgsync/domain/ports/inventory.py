"""Ports for reading the dependency manager's installed packages."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pkgsync.domain.model import PackageDescriptor


@runtime_checkable
class InstalledPackageSource(Protocol):
    """Callable port listing the packages currently installed by the dependency manager.

    Implementations raise ``SnapshotError`` when the list cannot be read.
    """

    def __call__(self) -> Sequence[PackageDescriptor]: ...


__all__ = ["InstalledPackageSource"]
