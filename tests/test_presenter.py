"""Tests for presenting ranked entries and the search pipeline."""

from __future__ import annotations

import pytest

from opendir import search
from opendir.models import ActionRecord, Entry
from opendir.presenter import EMPTY_QUERY_TITLE, NO_MATCH_SUBTITLE, present

DASHBOARD = Entry(name="Dashboard", path="http://www.test.blub")
BOOKMARKS = Entry(name="Bookmarks", path="http://www.bookmarks.blub")


def test_maps_entries_to_records() -> None:
    records = present([DASHBOARD], "d", "open")

    assert records == [
        ActionRecord(
            title="Dashboard",
            subtitle="execute → open http://www.test.blub",
            payload="http://www.test.blub",
        )
    ]


def test_keeps_entry_order() -> None:
    records = present([BOOKMARKS, DASHBOARD], "o", "code")

    assert [record.title for record in records] == ["Bookmarks", "Dashboard"]


def test_empty_query_asks_for_a_pattern() -> None:
    (record,) = present([], "", "code")

    assert record.title == EMPTY_QUERY_TITLE
    assert record.payload is None


def test_empty_query_hint_lists_roots() -> None:
    (record,) = present([], "", "code", roots=["/a", "/b"])

    assert record.subtitle == "Type part of a directory name in /a, /b"


def test_non_matching_query_reports_nothing_found() -> None:
    (record,) = present([], "z", "code")

    assert record.title == "Nothing found for 'z'"
    assert record.subtitle == NO_MATCH_SUBTITLE
    assert record.payload is None


def test_search_finds_dashboard() -> None:
    records = search([DASHBOARD], "d", "open")

    assert [record.title for record in records] == ["Dashboard"]
    assert records[0].payload == DASHBOARD.path


def test_search_without_match_returns_fallback() -> None:
    records = search([DASHBOARD], "z", "open")

    assert records == [ActionRecord(title="Nothing found for 'z'", subtitle=NO_MATCH_SUBTITLE)]


def test_search_intercepts_empty_query(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail_rank(*args: object, **kwargs: object) -> list[Entry]:
        raise AssertionError("empty query must not be ranked")

    monkeypatch.setattr("opendir.pipeline.rank", fail_rank)

    records = search([DASHBOARD, BOOKMARKS], "", "open")

    assert [record.title for record in records] == [EMPTY_QUERY_TITLE]


@pytest.mark.parametrize("query", ["", "d", "o", "z", " ", "Dashboard!"])
@pytest.mark.parametrize("entries", [[], [DASHBOARD], [DASHBOARD, BOOKMARKS]])
def test_search_never_returns_an_empty_list(entries: list[Entry], query: str) -> None:
    assert search(entries, query, "open")


def test_empty_query_asks_for_a_pattern_even_with_entries() -> None:
    records = present([DASHBOARD, BOOKMARKS], "", "code")

    assert [record.title for record in records] == [EMPTY_QUERY_TITLE]
    assert records[0].payload is None
