"""Tests for running the configured program."""

from __future__ import annotations

import subprocess
import sys
from typing import TYPE_CHECKING

import pytest

from opendir.errors import ToolRuntimeError
from opendir.invoker import build_command, invoke

if TYPE_CHECKING:
    from pathlib import Path


def test_build_command_passes_path_as_single_argument() -> None:
    assert build_command("code", "/tmp/my dir") == ["code", "/tmp/my dir"]


def test_invoke_runs_the_program(tmp_path: Path) -> None:
    marker = tmp_path / "marker"
    script = tmp_path / "opener.py"
    script.write_text(
        f"import pathlib\npathlib.Path({str(marker)!r}).write_text('opened', encoding='utf-8')\n",
        encoding="utf-8",
    )

    invoke(sys.executable, str(script))

    assert marker.read_text(encoding="utf-8") == "opened"


def test_invoke_does_not_use_a_shell(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[list[str], dict[str, object]]] = []

    def fake_run(command: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        calls.append((command, kwargs))
        return subprocess.CompletedProcess(command, 0, stdout="", stderr="")

    monkeypatch.setattr("opendir.invoker.subprocess.run", fake_run)

    invoke("code", "/tmp/a; rm -rf /")

    assert calls[0][0] == ["code", "/tmp/a; rm -rf /"]
    assert calls[0][1].get("shell") is None


def test_missing_program_is_a_runtime_error(tmp_path: Path) -> None:
    with pytest.raises(ToolRuntimeError) as excinfo:
        invoke(str(tmp_path / "no-such-program"), str(tmp_path))

    assert excinfo.value.code == "E4001"
    assert excinfo.value.exit_code == 70
    assert excinfo.value.suggestion is not None


def test_non_zero_exit_is_a_runtime_error(tmp_path: Path) -> None:
    script = tmp_path / "fail.py"
    script.write_text("import sys\nsys.stderr.write('cannot open')\nsys.exit(3)\n", encoding="utf-8")

    with pytest.raises(ToolRuntimeError) as excinfo:
        invoke(sys.executable, str(script))

    assert excinfo.value.code == "E4002"
    assert excinfo.value.details["returncode"] == 3
    assert excinfo.value.details["stderr"] == "cannot open"
