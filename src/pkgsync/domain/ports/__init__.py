"""Domain port definitions for adapters."""

from __future__ import annotations

from .inventory import InstalledPackageSource
from .process import ProcessLauncher
from .registry import (
    PackagePredicate,
    PackageRegistry,
    all_of,
    any_record,
    in_state,
    installed_by,
)
from .unit_of_work import (
    RegistryRepositories,
    RegistryUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "InstalledPackageSource",
    "PackagePredicate",
    "PackageRegistry",
    "ProcessLauncher",
    "RegistryRepositories",
    "RegistryUnitOfWork",
    "RepositoryCollection",
    "UnitOfWork",
    "all_of",
    "any_record",
    "in_state",
    "installed_by",
]
