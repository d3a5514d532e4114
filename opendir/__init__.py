"""opendir: fuzzy-find directories and open them from Alfred."""

from __future__ import annotations

from opendir.models import ActionRecord, Entry, ScoredEntry
from opendir.presenter import present
from opendir.ranking import rank
from opendir.scoring import NO_MATCH, fuzzy_match, score
from opendir.pipeline import search

__version__ = "1.0.0"
__all__ = [
    "ActionRecord",
    "Entry",
    "NO_MATCH",
    "ScoredEntry",
    "fuzzy_match",
    "present",
    "rank",
    "score",
    "search",
]
