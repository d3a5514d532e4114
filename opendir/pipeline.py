"""The search pipeline: candidates and a query in, action records out."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from opendir.models import ActionRecord, Entry
from opendir.presenter import present
from opendir.ranking import rank

logger = logging.getLogger(__name__)


def search(
    entries: Sequence[Entry],
    query: str,
    action_label: str,
    *,
    roots: Sequence[str] = (),
) -> list[ActionRecord]:
    """Rank ``entries`` against ``query`` and present the result.

    An empty query is answered with the "add a search pattern" record
    without scoring any entry.
    """
    if not query:
        logger.debug("empty query, skipping ranking of %d entries", len(entries))
        return present([], query, action_label, roots=roots)
    return present(rank(entries, query), query, action_label, roots=roots)
