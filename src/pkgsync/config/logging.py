"""Shared logging helpers for pkgsync."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with defaults suited to install hooks.

    Parameters mirror ``logging.basicConfig``. Warnings about packages are part of
    the normal output, so the format stays short. Pass ``force=True`` to
    reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level,
        format="%(levelname)s [%(name)s] %(message)s",
        force=force,
    )
