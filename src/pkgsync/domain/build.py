"""Best-effort trigger for the external registry build step."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from pkgsync.domain.ports.process import ProcessLauncher

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BuildLaunch:
    """Outcome of a build trigger; the launched process is never awaited."""

    launched: bool
    command: tuple[str, ...] = ()
    pid: int | None = None


def build_command(executable: Path, *, ansi: bool) -> tuple[str, ...]:
    return (str(executable), "build", "--force", "--ansi" if ansi else "--no-ansi")


def trigger_build(launcher: ProcessLauncher, executable: Path, *, ansi: bool = False) -> BuildLaunch:
    """Launch ``<executable> build --force`` if the platform and executable allow it."""

    if not launcher.is_supported():
        log.debug("Skipping build: process launching is not supported on this platform")
        return BuildLaunch(launched=False)
    if not executable.is_file():
        log.debug("Skipping build: %s does not exist", executable)
        return BuildLaunch(launched=False)

    log.info('Running "%s build"', executable.name)
    command = build_command(executable, ansi=ansi)
    pid = launcher.launch(command)
    return BuildLaunch(launched=True, command=command, pid=pid)
