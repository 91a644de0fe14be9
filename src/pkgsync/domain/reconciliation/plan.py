"""Reconciliation actions and the per-run result.

Actions are decided from one pass over the inventory snapshot and one pass over
the registry. They drive registry mutation and logging and are never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from pathlib import Path


class ActionKind(StrEnum):
    INSTALL = "install"
    REINSTALL = "reinstall"
    REMOVE = "remove"
    SKIP = "skip"


class SkipReason(StrEnum):
    """Why a package was left untouched."""

    UNCHANGED = "unchanged"
    FOREIGN_INSTALLER = "foreign installer"
    MOVED = "moved"


@dataclass(frozen=True, slots=True, kw_only=True)
class InstallAction:
    name: str
    install_path: Path
    kind: Literal[ActionKind.INSTALL] = ActionKind.INSTALL


@dataclass(frozen=True, slots=True, kw_only=True)
class ReinstallAction:
    name: str
    old_path: Path
    new_path: Path
    kind: Literal[ActionKind.REINSTALL] = ActionKind.REINSTALL


@dataclass(frozen=True, slots=True, kw_only=True)
class RemoveAction:
    name: str
    install_path: Path
    kind: Literal[ActionKind.REMOVE] = ActionKind.REMOVE


@dataclass(frozen=True, slots=True, kw_only=True)
class SkipAction:
    name: str
    reason: SkipReason
    kind: Literal[ActionKind.SKIP] = ActionKind.SKIP


type ReconciliationAction = InstallAction | ReinstallAction | RemoveAction | SkipAction


@dataclass(frozen=True, slots=True, kw_only=True)
class PackageFailure:
    """A package the registry refused to install during the run."""

    name: str
    install_path: Path
    error: Exception


@dataclass(slots=True)
class ReconciliationResult:
    """Actions decided for one reconciliation run, in execution order."""

    actions: list[ReconciliationAction] = field(default_factory=list["ReconciliationAction"])
    failures: list[PackageFailure] = field(default_factory=list["PackageFailure"])

    def add(self, action: ReconciliationAction) -> None:
        self.actions.append(action)

    def add_failure(self, failure: PackageFailure) -> None:
        self.failures.append(failure)

    def by_kind(self, kind: ActionKind) -> list[ReconciliationAction]:
        return [action for action in self.actions if action.kind is kind]

    def count(self, kind: ActionKind) -> int:
        return len(self.by_kind(kind))

    @property
    def mutations(self) -> list[ReconciliationAction]:
        """Actions that changed the registry."""

        return [action for action in self.actions if action.kind is not ActionKind.SKIP]

    @property
    def failed_names(self) -> set[str]:
        return {failure.name for failure in self.failures}
