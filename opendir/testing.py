"""Test utilities for the opendir command line."""

from __future__ import annotations

import json
from typing import Any

from typer.testing import CliRunner, Result

from opendir.cli import app


class OpendirTestClient:
    """Wrapper around CliRunner with Script Filter assertions."""

    def __init__(self, env: dict[str, str] | None = None) -> None:
        self.app = app
        self.runner = CliRunner()
        self.env = dict(env or {})

    def invoke(self, *args: Any, **kwargs: Any) -> Result:
        env = {**self.env, **kwargs.pop("env", {})}
        return self.runner.invoke(self.app, *args, env=env, **kwargs)

    def assert_script_filter(self, result: Result) -> list[dict[str, Any]]:
        """Verify stdout is a Script Filter payload and return its items."""
        assert result.exit_code == 0, result.output
        try:
            payload = json.loads(result.stdout)
            assert isinstance(payload["items"], list)
            assert payload["items"], "Script Filter payload has no items"
            for item in payload["items"]:
                assert "title" in item
                assert "valid" in item
            return payload["items"]
        except (json.JSONDecodeError, KeyError, AssertionError) as e:
            raise AssertionError(f"Invalid Script Filter payload: {e}\nOutput: {result.output}") from e

    def assert_error(self, result: Result, code: str, exit_code: int) -> dict[str, Any]:
        """Verify a failed invocation reported ``code`` as JSON on stderr."""
        assert result.exit_code == exit_code, f"Expected exit code {exit_code}, got {result.exit_code}. Output: {result.output}"
        for line in reversed(result.output.strip().splitlines()):
            try:
                data = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(data, dict) and "error" in data:
                assert data["error"]["code"] == code, data
                return data["error"]
        raise AssertionError(f"No error payload in output: {result.output}")
