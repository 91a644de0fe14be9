from __future__ import annotations

from typing import TYPE_CHECKING

from pkgsync.domain.build import BuildLaunch, trigger_build
from tests.helpers.registry import FakeLauncher

if TYPE_CHECKING:
    from pathlib import Path


def _executable(tmp_path: Path) -> Path:
    executable = tmp_path / "bin" / "pkgsync-build"
    executable.parent.mkdir()
    executable.write_text("#!/bin/sh\n")
    return executable


def test_trigger_build_launches_force_build(tmp_path: Path) -> None:
    launcher = FakeLauncher()
    executable = _executable(tmp_path)

    outcome = trigger_build(launcher, executable, ansi=False)

    command = (str(executable), "build", "--force", "--no-ansi")
    assert launcher.commands == [command]
    assert outcome == BuildLaunch(launched=True, command=command, pid=4242)


def test_trigger_build_forwards_ansi_flag(tmp_path: Path) -> None:
    launcher = FakeLauncher()

    trigger_build(launcher, _executable(tmp_path), ansi=True)

    assert launcher.commands[0][-1] == "--ansi"


def test_trigger_build_skips_missing_executable(tmp_path: Path) -> None:
    launcher = FakeLauncher()

    outcome = trigger_build(launcher, tmp_path / "missing")

    assert outcome.launched is False
    assert launcher.commands == []


def test_trigger_build_skips_unsupported_platform(tmp_path: Path) -> None:
    launcher = FakeLauncher(supported=False)

    outcome = trigger_build(launcher, _executable(tmp_path))

    assert outcome == BuildLaunch(launched=False)
    assert launcher.commands == []


def test_trigger_build_reports_launch_without_pid(tmp_path: Path) -> None:
    launcher = FakeLauncher(pid=None)

    outcome = trigger_build(launcher, _executable(tmp_path))

    assert outcome.launched is True
    assert outcome.pid is None
