"""Configuration precedence system for opendir."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

try:
    import tomllib  # type: ignore[import-not-found]
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found, no-redef]

from opendir.errors import InputError, Suggestion

logger = logging.getLogger(__name__)

ENV_PREFIX = "OPENDIR_"
# Variables set by the Alfred workflow configuration.
WORKFLOW_VARIABLES = ("DIRECTORY_PATH", "BINARY_TO_EXECUTE")
DEFAULT_CONFIG_PATH = Path("~/.config/opendir/config.toml")


def split_roots(value: str) -> list[str]:
    """Split a comma-separated root list, trimming items and dropping empties."""
    return [item.strip() for item in value.split(",") if item.strip()]


class OpendirConfig:
    """Resolves configuration through the precedence chain.

    Defaults, then the TOML file, then environment variables, then explicit
    overrides from the command line via :meth:`override`.
    """

    def __init__(
        self,
        config_path: str | os.PathLike[str] | None = None,
        *,
        environ: dict[str, str] | None = None,
    ) -> None:
        self._environ = dict(os.environ if environ is None else environ)
        self._config: dict[str, Any] = {}
        self._load_defaults()
        self._load_file_config(config_path)
        self._load_env_vars()

    def _load_defaults(self) -> None:
        self._config = {
            "output": "alfred",
        }

    def _resolve_config_path(self, config_path: str | os.PathLike[str] | None) -> tuple[Path, bool]:
        if config_path is not None:
            return Path(config_path).expanduser(), True
        env_path = self._environ.get(f"{ENV_PREFIX}CONFIG")
        if env_path:
            return Path(env_path).expanduser(), True
        return DEFAULT_CONFIG_PATH.expanduser(), False

    def _load_file_config(self, config_path: str | os.PathLike[str] | None) -> None:
        """Load from the [opendir] table, or the top level, of a TOML file."""
        path, explicit = self._resolve_config_path(config_path)
        if not path.is_file():
            if explicit:
                raise InputError(
                    message=f"Config file not found: {path}",
                    code="E1003",
                    details={"path": str(path)},
                )
            return

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise InputError(
                message=f"Unable to read config file: {path}",
                code="E1003",
                details={"path": str(path), "reason": str(exc)},
            ) from exc

        section = data.get("opendir", data)
        if not isinstance(section, dict):
            raise InputError(
                message=f"Invalid [opendir] table in {path}",
                code="E1003",
                details={"path": str(path)},
            )
        logger.debug("loaded config file %s", path)
        self._config.update({str(key).lower(): value for key, value in section.items()})

    def _load_env_vars(self) -> None:
        """Load the workflow variables and OPENDIR_* environment variables."""
        for name in WORKFLOW_VARIABLES:
            value = self._environ.get(name)
            if value:
                self._config[name.lower()] = value
        for key, value in self._environ.items():
            if key.startswith(ENV_PREFIX) and key != f"{ENV_PREFIX}CONFIG":
                self._config[key[len(ENV_PREFIX):].lower()] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    def override(self, **values: Any) -> None:
        """Apply command-line values; ``None`` leaves a key untouched."""
        self._config.update({key: value for key, value in values.items() if value is not None})

    def roots(self) -> list[str]:
        """Root directories to list, with ``~`` expanded."""
        raw = self._config.get("directory_path")
        if isinstance(raw, (list, tuple)):
            items = [str(item).strip() for item in raw if str(item).strip()]
        elif isinstance(raw, str):
            items = split_roots(raw)
        else:
            items = []

        if not items:
            raise InputError(
                message="DIRECTORY_PATH not set",
                code="E1001",
                suggestion=Suggestion(
                    action="configure",
                    fix="Set DIRECTORY_PATH to a comma-separated list of directories",
                    example="DIRECTORY_PATH=~/projects,~/work",
                ),
            )
        return [os.path.expanduser(item) for item in items]

    def binary(self) -> str:
        """Program executed against the chosen path."""
        value = self._config.get("binary_to_execute")
        if not isinstance(value, str) or not value.strip():
            raise InputError(
                message="BINARY_TO_EXECUTE not set",
                code="E1002",
                suggestion=Suggestion(
                    action="configure",
                    fix="Set BINARY_TO_EXECUTE to the program that opens a directory",
                    example="BINARY_TO_EXECUTE=code",
                ),
            )
        return value.strip()
