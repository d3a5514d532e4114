"""Filesystem provider listing the sub-directories of root directories."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from opendir.errors import StateError, Suggestion
from opendir.models import Entry
from opendir.providers.base import EntryProvider

logger = logging.getLogger(__name__)


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError as exc:
        logger.debug("skipping %s: %s", path, exc)
        return False


def _unreadable_root(root: Path, exc: OSError) -> StateError:
    return StateError(
        message=f"Unable to read directory: {root}",
        code="E3002",
        details={"path": str(root), "reason": str(exc)},
    )


class DirectoryProvider(EntryProvider):
    """Lists the immediate sub-directories of each root.

    Roots are visited in the given order and their children are sorted by
    name. Links to directories are included, hidden directories too.
    """

    def __init__(self, roots: Iterable[str | os.PathLike[str]]) -> None:
        self.roots = [Path(root) for root in roots]

    def _read_root(self, root: Path) -> list[Path]:
        try:
            exists = root.is_dir()
        except OSError as exc:
            raise _unreadable_root(root, exc) from exc
        if not exists:
            raise StateError(
                message=f"Directory does not exist: {root}",
                code="E3001",
                suggestion=Suggestion(
                    action="configure",
                    fix="Point DIRECTORY_PATH at existing directories",
                    example="DIRECTORY_PATH=~/projects,~/work",
                ),
                details={"path": str(root)},
            )
        try:
            children = list(root.iterdir())
        except OSError as exc:
            raise _unreadable_root(root, exc) from exc
        return sorted(child for child in children if _is_dir(child))

    def get_entries(self) -> list[Entry]:
        entries: list[Entry] = []
        for root in self.roots:
            directories = self._read_root(root)
            logger.debug("found %d directories in %s", len(directories), root)
            entries.extend(Entry.from_path(directory) for directory in directories)
        return entries
