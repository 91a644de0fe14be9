"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING, Final

from pkgsync.adapters.installed import InstalledManifestSource
from pkgsync.adapters.process import SubprocessLauncher
from pkgsync.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from pkgsync.config import get_sync_config
from pkgsync.domain.build import BuildLaunch, trigger_build
from pkgsync.domain.reconciliation import (
    LoadErrorReporter,
    Reconciler,
    build_snapshot,
    first_error,
)
from pkgsync.domain.reconciliation.plan import ActionKind

if TYPE_CHECKING:
    from pkgsync.config import SyncConfig
    from pkgsync.domain.ports import InstalledPackageSource, ProcessLauncher, RegistryUnitOfWork
    from pkgsync.domain.reconciliation import (
        ErrorDisplayPolicy,
        PackageWarning,
        ReconciliationResult,
    )

UnitOfWorkFactory = Callable[[], "RegistryUnitOfWork"]

POST_INSTALL_EVENT: Final[str] = "post-install"
POST_UPDATE_EVENT: Final[str] = "post-update"

log = getLogger(__name__)


@dataclass(slots=True)
class SyncRegistryResult:
    """Outcome of one registry synchronisation run."""

    reconciliation: ReconciliationResult
    warnings: list[PackageWarning] = field(default_factory=list["PackageWarning"])
    build: BuildLaunch = field(default_factory=lambda: BuildLaunch(launched=False))


def sync_registry(
    *,
    config: SyncConfig | None = None,
    source: InstalledPackageSource | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    launcher: ProcessLauncher | None = None,
    display: ErrorDisplayPolicy = first_error,
    ansi: bool = False,
) -> SyncRegistryResult:
    """Bring the package registry in line with the installed packages.

    The inventory is read before the registry is touched, so an unreadable
    inventory aborts the run without mutations. The build step runs last, whether
    or not packages produced warnings.
    """

    effective_config = config or get_sync_config()
    effective_source = source or InstalledManifestSource(effective_config.installed_manifest)
    if unit_of_work_factory is None:
        if not is_started():
            startup()
        unit_of_work_factory = partial(SqlAlchemyUnitOfWork, root_dir=effective_config.root_dir)
    effective_launcher = launcher or SubprocessLauncher(cwd=effective_config.root_dir)

    log.info("Looking for updated packages")
    snapshot = build_snapshot(effective_source())
    log.debug("Inventory holds %s installable packages", len(snapshot))

    with unit_of_work_factory() as uow:
        registry = uow.repositories.packages
        reconciler = Reconciler(
            registry,
            installer=effective_config.installer,
            root_dir=effective_config.root_dir,
            display=display,
        )
        reconciliation = reconciler.reconcile(snapshot)
        uow.commit()
        warnings = LoadErrorReporter(
            registry,
            display=display,
            root_dir=effective_config.root_dir,
        ).report()

    log.debug(
        "Reconciliation finished: installed=%s, reinstalled=%s, removed=%s, failed=%s",
        reconciliation.count(ActionKind.INSTALL),
        reconciliation.count(ActionKind.REINSTALL),
        reconciliation.count(ActionKind.REMOVE),
        len(reconciliation.failures),
    )

    build = BuildLaunch(launched=False)
    if effective_config.run_build:
        build = trigger_build(effective_launcher, effective_config.build_executable, ansi=ansi)

    return SyncRegistryResult(reconciliation=reconciliation, warnings=warnings, build=build)


class InstallHook:
    """Run one registry synchronisation per install or update operation.

    The dependency manager notifies both ``post-install`` and ``post-update`` and
    may deliver the same notification twice; only the first one runs.
    """

    def __init__(self, run: Callable[[], SyncRegistryResult] | None = None) -> None:
        self._run = run or sync_registry
        self._run_post_install = True

    def subscribed_events(self) -> dict[str, Callable[[], SyncRegistryResult | None]]:
        return {
            POST_INSTALL_EVENT: self.post_install,
            POST_UPDATE_EVENT: self.post_install,
        }

    def dispatch(self, event: str) -> SyncRegistryResult | None:
        handler = self.subscribed_events().get(event)
        if handler is None:
            raise ValueError(f"Unsupported event: {event}")
        return handler()

    def post_install(self) -> SyncRegistryResult | None:
        if not self._run_post_install:
            log.debug("Registry already synchronised during this run")
            return None

        self._run_post_install = False
        return self._run()
