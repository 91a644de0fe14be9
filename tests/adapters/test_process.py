from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from pkgsync.adapters import process as process_module
from pkgsync.adapters.process import SubprocessLauncher
from pkgsync.domain.ports import ProcessLauncher

if TYPE_CHECKING:
    from pathlib import Path


class _FakeProcess:
    pid = 1234


def test_launch_starts_detached_process(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    captured: dict[str, Any] = {}

    def fake_popen(command: list[str], **kwargs: Any) -> _FakeProcess:
        captured["command"] = command
        captured.update(kwargs)
        return _FakeProcess()

    monkeypatch.setattr(process_module.subprocess, "Popen", fake_popen)
    monkeypatch.setattr(process_module.os, "name", "posix")

    pid = SubprocessLauncher(cwd=tmp_path).launch(("tool", "build", "--force"))

    assert pid == 1234
    assert captured["command"] == ["tool", "build", "--force"]
    assert captured["cwd"] == str(tmp_path)
    assert captured["start_new_session"] is True


def test_launch_failure_is_logged_not_raised(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    def failing_popen(command: list[str], **kwargs: Any) -> _FakeProcess:
        raise FileNotFoundError(command[0])

    monkeypatch.setattr(process_module.subprocess, "Popen", failing_popen)
    caplog.set_level("WARNING")

    assert SubprocessLauncher().launch(("missing-tool",)) is None
    assert "Could not launch missing-tool" in caplog.text


def test_launcher_is_supported_on_posix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(process_module.os, "name", "posix")

    assert SubprocessLauncher().is_supported()
    assert isinstance(SubprocessLauncher(), ProcessLauncher)


def test_launcher_is_unsupported_elsewhere(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(process_module.os, "name", "java")

    assert not SubprocessLauncher().is_supported()
