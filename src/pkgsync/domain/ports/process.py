"""Ports for launching external processes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class ProcessLauncher(Protocol):
    """Fire-and-forget process launcher.

    ``launch`` does not wait for the process and does not raise launch failures to
    the caller; it returns the process id when one is available.
    """

    def is_supported(self) -> bool: ...

    def launch(self, command: Sequence[str]) -> int | None: ...
