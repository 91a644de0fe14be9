"""Path rendering helpers for user-facing messages."""

from __future__ import annotations

import os
from pathlib import Path


def display_path(path: Path, root_dir: Path) -> str:
    """Render ``path`` relative to ``root_dir``, walking up with ``..`` if needed.

    Paths that cannot be expressed relative to the root (another drive, or a
    relative path against an absolute root) are returned unchanged.
    """

    try:
        return Path(path).relative_to(root_dir, walk_up=True).as_posix()
    except ValueError:
        return str(path)


def strip_root(message: str, root_dir: Path) -> str:
    """Remove ``root_dir`` prefixes from ``message``."""

    prefix = str(root_dir).rstrip("/\\")
    if not prefix:
        return message
    return message.replace(prefix + os.sep, "").replace(prefix + "/", "")
