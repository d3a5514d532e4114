"""Ordering and filtering of candidate entries for a query."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from operator import attrgetter

from opendir.models import Entry, ScoredEntry
from opendir.scoring import NO_MATCH, score

logger = logging.getLogger(__name__)


def score_entries(entries: Iterable[Entry], query: str) -> list[ScoredEntry]:
    """Score every entry once, keeping the input order."""
    return [ScoredEntry(entry, score(entry.name, query)) for entry in entries]


def rank(entries: Iterable[Entry], query: str) -> list[Entry]:
    """Return the entries matching ``query``, best match first.

    The sort is stable, so entries with equal scores keep their input order.
    """
    scored = score_entries(entries, query)
    kept = [item for item in scored if item.score < NO_MATCH]
    kept.sort(key=attrgetter("score"))
    logger.debug("query %r kept %d of %d entries", query, len(kept), len(scored))
    return [item.entry for item in kept]
