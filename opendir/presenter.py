"""Turn ranked entries into action records."""

from __future__ import annotations

from collections.abc import Sequence

from opendir.models import ActionRecord, Entry

EMPTY_QUERY_TITLE = "Add a search pattern"
NO_MATCH_SUBTITLE = "Try a different search pattern"


def describe_action(action_label: str, path: str) -> str:
    return f"execute → {action_label} {path}"


def to_record(entry: Entry, action_label: str) -> ActionRecord:
    return ActionRecord(
        title=entry.name,
        subtitle=describe_action(action_label, entry.path),
        payload=entry.path,
    )


def empty_query_record(roots: Sequence[str] = ()) -> ActionRecord:
    if roots:
        subtitle = "Type part of a directory name in " + ", ".join(roots)
    else:
        subtitle = "Type part of a directory name"
    return ActionRecord(title=EMPTY_QUERY_TITLE, subtitle=subtitle)


def no_match_record(query: str) -> ActionRecord:
    return ActionRecord(title=f"Nothing found for '{query}'", subtitle=NO_MATCH_SUBTITLE)


def present(
    entries: Sequence[Entry],
    query: str,
    action_label: str,
    *,
    roots: Sequence[str] = (),
) -> list[ActionRecord]:
    """Map ranked entries to records, or to a single fallback record.

    The result is never empty. An empty query always yields the hint record,
    whatever the entries. ``roots`` only feeds that hint.
    """
    if not query:
        return [empty_query_record(roots)]
    if entries:
        return [to_record(entry, action_label) for entry in entries]
    return [no_match_record(query)]
