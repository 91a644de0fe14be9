"""Package records, installed-package descriptors and inventory entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pkgsync.domain.model.enums import PackageState

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, slots=True, kw_only=True)
class PackageRecord:
    """A package as stored in the registry.

    ``installer`` tags the subsystem that registered the package. It is set by the
    operation that created the record and never rewritten; replacing a package means
    removing the record and installing a new one.

    ``load_errors`` keeps every failure cause the registry recorded, in order.
    """

    name: str
    install_path: Path
    installer: str
    state: PackageState = PackageState.ENABLED
    load_errors: tuple[Exception, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class PackageDescriptor:
    """A package as reported by the dependency manager.

    Alias packages carry no install location of their own; ``alias_of`` points at
    the package they stand in for. Metapackages have ``install_path=None``.
    """

    name: str
    install_path: Path | None = None
    alias_of: PackageDescriptor | None = None

    @property
    def is_alias(self) -> bool:
        return self.alias_of is not None

    def resolve(self) -> PackageDescriptor:
        """Follow alias indirection down to the real package."""

        package = self
        while package.alias_of is not None:
            package = package.alias_of
        return package


@dataclass(frozen=True, slots=True)
class InventoryEntry:
    """One installable package of the current run's inventory."""

    name: str
    install_path: Path
