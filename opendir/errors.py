"""Error hierarchy and structured error models.

Each subclass fixes its category, exit code and default error code. The
code ranges are E1xxx for input, E3xxx for filesystem state, E4xxx for the
external program and E5xxx for anything unexpected.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel

from opendir.exit_codes import ExitCode


class ErrorCategory(str, Enum):
    INPUT = "input"
    STATE = "state"
    RUNTIME = "runtime"
    INTERNAL = "internal"


class Suggestion(BaseModel):
    action: str
    fix: str
    example: str | None = None


class ToolError(Exception):
    """Base error for everything that terminates an invocation."""

    category: ClassVar[ErrorCategory] = ErrorCategory.RUNTIME
    exit_code_for_category: ClassVar[ExitCode] = ExitCode.INTERNAL_ERROR
    default_code: ClassVar[str] = "E4000"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        suggestion: Suggestion | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.suggestion = suggestion
        self.details = details or {}
        self.exit_code = int(self.exit_code_for_category)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "category": self.category.value,
            "suggestion": self.suggestion.model_dump() if self.suggestion else None,
            "details": self.details,
        }


class InputError(ToolError):
    """Missing or invalid configuration and arguments."""

    category = ErrorCategory.INPUT
    exit_code_for_category = ExitCode.INVALID_INPUT
    default_code = "E1000"


class StateError(ToolError):
    """The filesystem is not in the expected state."""

    category = ErrorCategory.STATE
    exit_code_for_category = ExitCode.STATE_ERROR
    default_code = "E3000"


class ToolRuntimeError(ToolError):
    """The external program could not be run or failed."""


class InternalError(ToolError):
    category = ErrorCategory.INTERNAL
    default_code = "E5000"
