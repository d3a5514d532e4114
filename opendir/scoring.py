"""Fuzzy subsequence scoring of directory names.

The query must appear in the name as an ordered subsequence. Among all the
ways to place it, the best-scoring alignment wins. Matches on word
boundaries, camel-case humps and runs of consecutive characters score
higher than scattered ones.

Matching uses smart case: a query with an uppercase character is matched
case-sensitively, an all-lowercase query matches either case.
"""

from __future__ import annotations

from enum import Enum

SCORE_MATCH = 16
GAP_START = -3
GAP_EXTENSION = -1
BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_CAMEL = BONUS_BOUNDARY + GAP_EXTENSION
BONUS_CONSECUTIVE = -(GAP_START + GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2
PENALTY_CASE_MISMATCH = GAP_EXTENSION * 2

# Sign-inverted score of a name that does not match. Every match is lower.
NO_MATCH = 0

DELIMITERS = frozenset("/,:;|-_. ")

_UNREACHABLE = float("-inf")


class CharClass(Enum):
    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    DELIMITER = "delimiter"
    NON_WORD = "non_word"


def char_class(char: str) -> CharClass:
    if char.isupper():
        return CharClass.UPPER
    if char.isalpha():
        return CharClass.LOWER
    if char.isdigit():
        return CharClass.DIGIT
    if char in DELIMITERS or char.isspace():
        return CharClass.DELIMITER
    return CharClass.NON_WORD


def position_bonus(previous: CharClass, current: CharClass) -> int:
    """Bonus for matching a character of class ``current`` after ``previous``."""
    if current in (CharClass.DELIMITER, CharClass.NON_WORD):
        return 0
    if previous in (CharClass.DELIMITER, CharClass.NON_WORD):
        return BONUS_BOUNDARY
    if previous is CharClass.LOWER and current is CharClass.UPPER:
        return BONUS_CAMEL
    if previous is not CharClass.DIGIT and current is CharClass.DIGIT:
        return BONUS_CAMEL
    return 0


def _bonuses(name: str) -> list[int]:
    # The start of the name counts as a word boundary.
    previous = CharClass.DELIMITER
    bonuses: list[int] = []
    for char in name:
        current = char_class(char)
        bonuses.append(position_bonus(previous, current))
        previous = current
    return bonuses


def _chars_equal(left: str, right: str, case_sensitive: bool) -> bool:
    if case_sensitive:
        return left == right
    return left.lower() == right.lower()


def is_subsequence(name: str, query: str, case_sensitive: bool) -> bool:
    position = 0
    for char in query:
        while position < len(name) and not _chars_equal(name[position], char, case_sensitive):
            position += 1
        if position == len(name):
            return False
        position += 1
    return True


def fuzzy_match(name: str, query: str) -> int | None:
    """Return the raw match quality of ``query`` in ``name``.

    Higher is better. ``None`` means the query is not a subsequence of the
    name. An empty query returns 0, and every real match returns at least 1.
    """
    if not query:
        return 0

    case_sensitive = any(char.isupper() for char in query)
    if len(query) > len(name) or not is_subsequence(name, query, case_sensitive):
        return None

    bonuses = _bonuses(name)
    width = len(name)

    # previous[j]: best score with the preceding query char matched at name[j].
    previous: list[float] = [_UNREACHABLE] * width
    for row, query_char in enumerate(query):
        current: list[float] = [_UNREACHABLE] * width
        multiplier = BONUS_FIRST_CHAR_MULTIPLIER if row == 0 else 1
        # Best score of an alignment that skips at least one name char before column.
        best_gap = _UNREACHABLE
        for column, name_char in enumerate(name):
            if row > 0 and column >= 2:
                best_gap = max(best_gap + GAP_EXTENSION, previous[column - 2] + GAP_START)

            if not _chars_equal(name_char, query_char, case_sensitive):
                continue

            gained = SCORE_MATCH + bonuses[column] * multiplier
            if name_char != query_char:
                gained += PENALTY_CASE_MISMATCH

            if row == 0:
                current[column] = gained
                continue

            adjacent = previous[column - 1] + BONUS_CONSECUTIVE if column >= 1 else _UNREACHABLE
            best_previous = max(adjacent, best_gap)
            if best_previous != _UNREACHABLE:
                current[column] = best_previous + gained
        previous = current

    best = max(previous)
    return max(int(best), 1)


def score(name: str, query: str) -> int:
    """Sign-inverted match quality, usable directly as an ascending sort key.

    Returns ``NO_MATCH`` when ``query`` is empty or not found in ``name``.
    """
    raw = fuzzy_match(name, query)
    if raw is None:
        return NO_MATCH
    return -raw
