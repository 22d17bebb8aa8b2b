# src/tasker/tasks/task_store.py

from __future__ import annotations

import logging
from typing import Any

from bson.errors import BSONError
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .task_errors import (
    DuplicateTaskError,
    NoTasksFound,
    TaskDecodeError,
    TaskNotFoundError,
    TaskStoreError,
)
from .task_models import DuplicatePolicy, Task

logger = logging.getLogger(__name__)

PENDING_FILTER: dict[str, Any] = {"completed": False}
FINISHED_FILTER: dict[str, Any] = {"completed": True}


class TaskStore:
    """
    MongoDB task store.

    The collection is injected; opening and closing the client is the
    caller's job (see cli.bootstrap.open_task_store).

    Lookups by text are not unique: complete() and delete() act on the first
    match in the server's natural order.
    """

    def __init__(
        self,
        collection: Collection,
        *,
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.ALLOW,
    ) -> None:
        self._collection = collection
        self._duplicate_policy = duplicate_policy

    @property
    def duplicate_policy(self) -> DuplicatePolicy:
        return self._duplicate_policy

    # ---- low-level helpers ----

    @staticmethod
    def _text_filter(text: str) -> dict[str, Any]:
        return {"text": text}

    def _filter_tasks(self, filter_doc: dict[str, Any]) -> list[Task]:
        """
        Run a find() and decode every document.

        Raises NoTasksFound instead of returning an empty list. Any decode or
        transport error aborts the whole listing.
        """
        tasks: list[Task] = []
        try:
            cursor = self._collection.find(filter_doc)
            try:
                for doc in cursor:
                    tasks.append(Task.from_document(doc))
            finally:
                cursor.close()
        except PyMongoError as exc:
            raise TaskStoreError(f"find failed: {exc}") from exc
        except BSONError as exc:
            raise TaskDecodeError(f"cannot decode task document: {exc}") from exc

        logger.debug("find filter=%s matched=%d", filter_doc, len(tasks))
        if not tasks:
            raise NoTasksFound(filter_doc)
        return tasks

    # ---- public API ----

    def count_tasks(self) -> int:
        try:
            return int(self._collection.count_documents({}))
        except PyMongoError as exc:
            raise TaskStoreError(f"count failed: {exc}") from exc

    def create(self, task: Task) -> None:
        try:
            if self._duplicate_policy is DuplicatePolicy.REJECT:
                if self._collection.find_one(self._text_filter(task.text)) is not None:
                    raise DuplicateTaskError(task.text)
            self._collection.insert_one(task.to_document())
        except PyMongoError as exc:
            raise TaskStoreError(f"insert failed: {exc}") from exc
        except BSONError as exc:
            raise TaskStoreError(f"cannot encode task: {exc}") from exc
        logger.debug("Task added id=%s text=%r", task.id, task.text)

    def list_all(self) -> list[Task]:
        return self._filter_tasks({})

    def list_pending(self) -> list[Task]:
        return self._filter_tasks(dict(PENDING_FILTER))

    def list_finished(self) -> list[Task]:
        return self._filter_tasks(dict(FINISHED_FILTER))

    def complete(self, text: str) -> Task:
        """
        Mark the first task whose text equals `text` as completed.

        Returns the task as it was before the update. updated_at is left as
        is. A task that is already completed matches again and stays completed.
        """
        try:
            doc = self._collection.find_one_and_update(
                self._text_filter(text),
                {"$set": {"completed": True}},
                return_document=ReturnDocument.BEFORE,
            )
        except PyMongoError as exc:
            raise TaskStoreError(f"update failed: {exc}") from exc
        except BSONError as exc:
            raise TaskDecodeError(f"cannot decode task document: {exc}") from exc

        if doc is None:
            raise TaskNotFoundError(f"no task with text {text!r}")

        task = Task.from_document(doc)
        logger.debug("Task completed id=%s text=%r", task.id, task.text)
        return task

    def delete(self, text: str) -> None:
        """Remove the first task whose text equals `text`."""
        try:
            res = self._collection.delete_one(self._text_filter(text))
        except PyMongoError as exc:
            raise TaskStoreError(f"delete failed: {exc}") from exc

        if res.deleted_count == 0:
            raise TaskNotFoundError("no tasks were deleted")
        logger.debug("Task deleted text=%r", text)
