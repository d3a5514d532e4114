"""Alfred Script Filter JSON models."""

from __future__ import annotations

import json
from collections.abc import Iterable

from pydantic import BaseModel, Field

from opendir.models import ActionRecord


class AlfredItem(BaseModel):
    title: str
    subtitle: str = ""
    arg: str | None = None
    valid: bool = True

    @classmethod
    def from_record(cls, record: ActionRecord) -> AlfredItem:
        return cls(
            title=record.title,
            subtitle=record.subtitle,
            arg=record.payload,
            valid=record.actionable,
        )


class ScriptFilter(BaseModel):
    items: list[AlfredItem] = Field(default_factory=list)

    @classmethod
    def from_records(cls, records: Iterable[ActionRecord]) -> ScriptFilter:
        return cls(items=[AlfredItem.from_record(record) for record in records])

    def to_json(self) -> str:
        return json.dumps(self.model_dump(exclude_none=True), ensure_ascii=False)
