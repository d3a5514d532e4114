"""Run the configured program against a chosen path."""

from __future__ import annotations

import logging
import subprocess

from opendir.errors import Suggestion, ToolRuntimeError

logger = logging.getLogger(__name__)


def build_command(binary: str, path: str) -> list[str]:
    return [binary, path]


def invoke(binary: str, path: str) -> None:
    """Execute ``binary`` with ``path`` as its only argument.

    Raises ToolRuntimeError when the program cannot be started or exits
    with a non-zero status.
    """
    command = build_command(binary, path)
    logger.info("running %s", command)
    try:
        result = subprocess.run(command, capture_output=True, text=True, errors="replace", check=False)
    except OSError as exc:
        raise ToolRuntimeError(
            message=f"Failed to execute {binary}: {exc.strerror or exc}",
            code="E4001",
            suggestion=Suggestion(
                action="configure",
                fix="Set BINARY_TO_EXECUTE to an installed program",
                example="BINARY_TO_EXECUTE=open",
            ),
            details={"binary": binary, "path": path},
        ) from exc

    if result.returncode != 0:
        raise ToolRuntimeError(
            message=f"{binary} exited with status {result.returncode}",
            code="E4002",
            details={
                "binary": binary,
                "path": path,
                "returncode": result.returncode,
                "stderr": result.stderr.strip(),
            },
        )
