"""Base provider interface for candidate entries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from opendir.models import Entry


class EntryProvider(ABC):
    """Base class for all entry providers."""

    @abstractmethod
    def get_entries(self) -> list[Entry]:
        """Return the candidate entries for one invocation."""
        pass


class StaticProvider(EntryProvider):
    """Serves a fixed list of entries."""

    def __init__(self, entries: Iterable[Entry]) -> None:
        self._entries = list(entries)

    def get_entries(self) -> list[Entry]:
        return list(self._entries)
