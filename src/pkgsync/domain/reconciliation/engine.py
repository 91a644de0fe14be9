"""Reconcile the package registry with the dependency manager's inventory.

A run makes two passes, removals first:

1) registry records owned by this installer that the registry reports as
   ``not-found`` and that are absent from the inventory are removed; owned
   ``not-found`` records still listed in the inventory are left for the second
   pass, which re-paths them
2) every inventory entry is installed if unknown, left alone if its path is
   unchanged or if another installer owns it, and reinstalled otherwise

A package the registry refuses to install is reported as a warning and the run
continues with the next entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from pkgsync.domain.errors import InstallError
from pkgsync.domain.model import PackageState
from pkgsync.domain.paths import display_path
from pkgsync.domain.ports.registry import all_of, in_state, installed_by

from .plan import (
    InstallAction,
    PackageFailure,
    ReconciliationResult,
    ReinstallAction,
    RemoveAction,
    SkipAction,
    SkipReason,
)
from .report import first_error, format_package_warning

if TYPE_CHECKING:
    from pathlib import Path

    from pkgsync.domain.ports.registry import PackageRegistry

    from .report import ErrorDisplayPolicy
    from .snapshot import InventorySnapshot

DEFAULT_INSTALLER_NAME: Final[str] = "pkgsync"

log = getLogger(__name__)


@dataclass(slots=True)
class Reconciler:
    """Apply the minimal register/unregister operations for one run.

    Only records whose ``installer`` equals ``installer`` are ever removed or
    replaced.
    """

    registry: PackageRegistry
    installer: str = DEFAULT_INSTALLER_NAME
    root_dir: Path | None = None
    display: ErrorDisplayPolicy = first_error

    def reconcile(self, snapshot: InventorySnapshot) -> ReconciliationResult:
        result = ReconciliationResult()
        self.remove_removed_packages(snapshot, result)
        self.install_new_packages(snapshot, result)
        return result

    def remove_removed_packages(
        self,
        snapshot: InventorySnapshot,
        result: ReconciliationResult,
    ) -> None:
        candidates = self.registry.find_packages(
            all_of(installed_by(self.installer), in_state(PackageState.NOT_FOUND))
        )
        for record in candidates:
            if record.name in snapshot:
                result.add(SkipAction(name=record.name, reason=SkipReason.MOVED))
                continue

            log.info("Removing %s (%s)", record.name, self._display(record.install_path))
            self.registry.remove_package(record.name)
            result.add(RemoveAction(name=record.name, install_path=record.install_path))

    def install_new_packages(
        self,
        snapshot: InventorySnapshot,
        result: ReconciliationResult,
    ) -> None:
        for entry in snapshot.entries():
            name, install_path = entry.name, entry.install_path

            if not self.registry.has_package(name):
                log.info("Installing %s (%s)", name, self._display(install_path))
                result.add(InstallAction(name=name, install_path=install_path))
                self._install(install_path, name, result)
                continue

            existing = self.registry.get_package(name)
            if existing.install_path == install_path:
                result.add(SkipAction(name=name, reason=SkipReason.UNCHANGED))
                continue

            if existing.installer != self.installer:
                log.debug(
                    "Leaving %s alone: registered by installer %r",
                    name,
                    existing.installer,
                )
                result.add(SkipAction(name=name, reason=SkipReason.FOREIGN_INSTALLER))
                continue

            log.info("Reinstalling %s (%s)", name, self._display(install_path))
            result.add(
                ReinstallAction(name=name, old_path=existing.install_path, new_path=install_path)
            )
            self.registry.remove_package(name)
            self._install(install_path, name, result)

    def _install(self, install_path: Path, name: str, result: ReconciliationResult) -> None:
        try:
            self.registry.install_package(install_path, name, self.installer)
        except InstallError as exc:
            log.warning(
                format_package_warning(
                    f'Could not install package "{name}"',
                    install_path,
                    self.display((exc,)),
                    self._root_dir,
                )
            )
            result.add_failure(PackageFailure(name=name, install_path=install_path, error=exc))

    @property
    def _root_dir(self) -> Path:
        return self.root_dir or self.registry.root_dir

    def _display(self, path: Path) -> str:
        return display_path(path, self._root_dir)
