"""Shared test fixtures for opendir tests."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from opendir.testing import OpendirTestClient

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Keep the host's workflow variables and config file out of the tests."""
    for key in list(os.environ):
        if key.startswith("OPENDIR_") or key in ("DIRECTORY_PATH", "BINARY_TO_EXECUTE"):
            monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    yield
    # --verbose leaves the root logger at DEBUG with a handler on a closed stream.
    logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture
def runner() -> CliRunner:
    """Provide a CLI test runner."""
    return CliRunner()


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """A root with two directories, a hidden directory and a plain file."""
    root = tmp_path / "target_dir"
    root.mkdir()
    (root / "example_dir2").mkdir()
    (root / "example_dir1").mkdir()
    (root / ".hidden_dir").mkdir()
    (root / "notes.txt").write_text("not a directory", encoding="utf-8")
    return root


@pytest.fixture
def client(target_dir: Path) -> OpendirTestClient:
    """A CLI client configured the way the Alfred workflow configures it."""
    return OpendirTestClient(env={"DIRECTORY_PATH": str(target_dir), "BINARY_TO_EXECUTE": "code"})
