# src/tasker/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from bson import ObjectId

from .task_errors import EmptyTaskError, TaskDecodeError


class DuplicatePolicy(StrEnum):
    """
    What to do when a new task has the same text as an existing one.

    Lookups (done/rm) are by text, so with ALLOW they act on the first match
    in store order.
    """

    ALLOW = "allow"
    REJECT = "reject"

    @classmethod
    def from_env(cls, raw: str | None) -> DuplicatePolicy:
        if not raw:
            return cls.ALLOW
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.ALLOW


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class Task:
    id: ObjectId
    created_at: datetime | None
    # Set on creation only; completing a task does not refresh it.
    updated_at: datetime | None
    text: str
    completed: bool = False

    @classmethod
    def new(cls, text: str, *, now: datetime | None = None) -> Task:
        if text is None or not text.strip():
            raise EmptyTaskError()
        ts = now or _utcnow()
        return cls(id=ObjectId(), created_at=ts, updated_at=ts, text=text, completed=False)

    def to_document(self) -> dict[str, Any]:
        return {
            "_id": self.id,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "text": self.text,
            "completed": self.completed,
        }

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> Task:
        try:
            oid = doc["_id"]
            text = doc["text"]
        except KeyError as exc:
            raise TaskDecodeError(f"task document is missing field {exc.args[0]!r}") from exc

        if not isinstance(text, str):
            raise TaskDecodeError(f"task {oid} has non-string text: {type(text).__name__}")

        return cls(
            id=oid,
            created_at=doc.get("created_at"),
            updated_at=doc.get("updated_at"),
            text=text,
            completed=bool(doc.get("completed", False)),
        )
