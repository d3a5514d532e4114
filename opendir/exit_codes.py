"""Exit codes returned by the opendir command line."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes.

    Alfred only distinguishes zero from non-zero, the finer split is for
    shell users and tests.
    """

    SUCCESS = 0
    INVALID_INPUT = 2
    STATE_ERROR = 10
    INTERNAL_ERROR = 70
