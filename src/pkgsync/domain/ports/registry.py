"""Ports for the persistent package registry."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pkgsync.domain.model import PackageRecord, PackageState

if TYPE_CHECKING:
    from pathlib import Path


type PackagePredicate = Callable[[PackageRecord], bool]


@runtime_checkable
class PackageRegistry(Protocol):
    """Contract for the store of package records keyed by name.

    ``install_package`` raises ``InstallError`` (or a subclass) when the registry
    refuses the package; ``get_package`` raises ``PackageNotFoundError``.
    """

    @property
    def root_dir(self) -> Path: ...

    def find_packages(self, predicate: PackagePredicate) -> list[PackageRecord]: ...

    def install_package(self, install_path: Path, name: str, installer: str) -> PackageRecord: ...

    def remove_package(self, name: str) -> None: ...

    def has_package(self, name: str) -> bool: ...

    def get_package(self, name: str) -> PackageRecord: ...


def installed_by(installer: str) -> PackagePredicate:
    """Match records registered by ``installer``."""

    def predicate(record: PackageRecord) -> bool:
        return record.installer == installer

    return predicate


def in_state(*states: PackageState) -> PackagePredicate:
    """Match records in any of ``states``."""

    wanted = frozenset(states)

    def predicate(record: PackageRecord) -> bool:
        return record.state in wanted

    return predicate


def all_of(*predicates: PackagePredicate) -> PackagePredicate:
    def predicate(record: PackageRecord) -> bool:
        return all(check(record) for check in predicates)

    return predicate


def any_record(_record: PackageRecord) -> bool:
    return True
