"""Load-error reporting over the registry after reconciliation."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pkgsync.domain.model import PACKAGE_ERROR_STATES, PackageState
from pkgsync.domain.paths import display_path, strip_root
from pkgsync.domain.ports.registry import in_state

if TYPE_CHECKING:
    from pathlib import Path

    from pkgsync.domain.ports.registry import PackageRegistry

log = getLogger(__name__)

type ErrorDisplayPolicy = Callable[[Sequence[Exception]], Sequence[Exception]]


def first_error(errors: Sequence[Exception]) -> Sequence[Exception]:
    """Show only the first recorded cause."""

    return tuple(errors[:1])


def all_errors(errors: Sequence[Exception]) -> Sequence[Exception]:
    return tuple(errors)


def describe_error(error: Exception, root_dir: Path) -> str:
    return f"{type(error).__name__}: {strip_root(str(error), root_dir)}"


def format_package_warning(
    summary: str,
    install_path: Path,
    errors: Sequence[Exception],
    root_dir: Path,
) -> str:
    """Build a warning line such as ``Warning: <summary> (at <path>): <Error>: <message>``."""

    text = f"Warning: {summary} (at {display_path(install_path, root_dir)})"
    if errors:
        text += ": " + "; ".join(describe_error(error, root_dir) for error in errors)
    return text


@dataclass(frozen=True, slots=True, kw_only=True)
class PackageWarning:
    """A warning emitted for one package.

    ``errors`` always holds every recorded cause; ``message`` only renders the
    causes selected by the display policy.
    """

    name: str
    install_path: Path
    errors: tuple[Exception, ...]
    message: str
    state: PackageState | None = None


@dataclass(slots=True)
class LoadErrorReporter:
    """Warn about every registry record that failed to load."""

    registry: PackageRegistry
    display: ErrorDisplayPolicy = first_error
    root_dir: Path | None = None

    def report(self) -> list[PackageWarning]:
        root_dir = self.root_dir or self.registry.root_dir
        warnings: list[PackageWarning] = []
        for state in PACKAGE_ERROR_STATES:
            for record in self.registry.find_packages(in_state(state)):
                message = format_package_warning(
                    f'Could not load package "{record.name}"',
                    record.install_path,
                    self.display(record.load_errors),
                    root_dir,
                )
                log.warning(message)
                warnings.append(
                    PackageWarning(
                        name=record.name,
                        install_path=record.install_path,
                        errors=record.load_errors,
                        message=message,
                        state=record.state,
                    )
                )
        return warnings
