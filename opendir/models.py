"""Value types shared by the ranking pipeline."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True, order=True)
class Entry:
    """One candidate directory.

    ``path`` is handed back verbatim when the entry is chosen and is never
    parsed by the ranking code.
    """

    name: str
    path: str

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> Entry:
        """Build an entry from a filesystem path without resolving it."""
        return cls(name=Path(path).name, path=os.fspath(path))


class ScoredEntry(NamedTuple):
    entry: Entry
    score: int


class ActionRecord(BaseModel):
    """A display-ready result row.

    Records without a payload describe why there is nothing to choose.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: str = ""
    payload: str | None = None

    @property
    def actionable(self) -> bool:
        return self.payload is not None
