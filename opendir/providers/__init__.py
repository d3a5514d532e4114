"""Providers supplying candidate entries."""

from opendir.providers.base import EntryProvider, StaticProvider
from opendir.providers.filesystem import DirectoryProvider

__all__ = ["EntryProvider", "StaticProvider", "DirectoryProvider"]
