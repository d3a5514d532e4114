"""Output mode resolution and rendering."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

import click

from opendir.alfred import ScriptFilter
from opendir.models import ActionRecord


class OutputMode(str, Enum):
    ALFRED = "alfred"
    TEXT = "text"


def parse_output_mode(value: str) -> OutputMode:
    normalized = value.strip().lower()
    for mode in OutputMode:
        if normalized == mode.value:
            return mode
    raise click.BadParameter(f"Invalid output mode: {value!r}")


def render_text(records: Sequence[ActionRecord]) -> str:
    """One line per record; actionable records show their payload."""
    lines = []
    for record in records:
        if record.actionable:
            lines.append(f"{record.title}\t{record.payload}")
        else:
            lines.append(f"{record.title} ({record.subtitle})" if record.subtitle else record.title)
    return "\n".join(lines)


def render(records: Sequence[ActionRecord], mode: OutputMode) -> str:
    if mode is OutputMode.TEXT:
        return render_text(records)
    return ScriptFilter.from_records(records).to_json()
