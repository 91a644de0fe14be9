"""Detached subprocess launcher."""

from __future__ import annotations

import logging
import os
import subprocess
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

log = logging.getLogger(__name__)


class SubprocessLauncher:
    """Start a process without waiting for it.

    The child is detached from the parent's session so it outlives the current
    command. Launch failures are logged and reported as ``None``.
    """

    def __init__(self, *, cwd: Path | None = None) -> None:
        self.cwd = cwd

    def is_supported(self) -> bool:
        return os.name in {"posix", "nt"}

    def launch(self, command: Sequence[str]) -> int | None:
        kwargs: dict[str, Any] = {
            "cwd": str(self.cwd) if self.cwd is not None else None,
            "stdin": subprocess.DEVNULL,
            "close_fds": True,
        }
        if os.name == "nt":
            kwargs["creationflags"] = (
                subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
            )
        else:
            kwargs["start_new_session"] = True

        try:
            proc = subprocess.Popen(list(command), **kwargs)  # noqa: S603
        except OSError as exc:
            log.warning("Could not launch %s: %s", command[0] if command else "<empty>", exc)
            return None
        log.debug("Launched %s (pid=%s)", " ".join(command), proc.pid)
        return proc.pid


if TYPE_CHECKING:
    from pkgsync.domain.ports.process import ProcessLauncher

    _launcher_check: ProcessLauncher = SubprocessLauncher()
