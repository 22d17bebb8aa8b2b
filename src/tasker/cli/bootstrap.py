# src/tasker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- builds the MongoClient from settings,
- checks the server is reachable before any command runs against it,
- wires the collection into a TaskStore and releases the client afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from ..config import get_settings
from ..tasks.task_errors import TaskStoreError
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _client_kwargs(settings) -> dict[str, Any]:
    # Task timestamps are written as aware UTC datetimes; read them back the same way.
    kwargs: dict[str, Any] = {
        "appname": getattr(settings, "app_name", "tasker"),
        "tz_aware": True,
    }
    timeout_ms = getattr(settings, "mongo_timeout_ms", None)
    if timeout_ms is not None:
        kwargs["serverSelectionTimeoutMS"] = int(timeout_ms)
    return kwargs


@contextmanager
def open_task_store(settings=None, *, client_factory=MongoClient) -> Iterator[TaskStore]:
    """
    Open a client, ping the server and yield a TaskStore on the tasks collection.

    The client is closed when the block exits, whatever the outcome.
    client_factory is injectable for tests.
    """
    if settings is None:
        settings = get_settings()

    try:
        client = client_factory(settings.mongo_uri, **_client_kwargs(settings))
    except (PyMongoError, ValueError) as exc:
        raise TaskStoreError(f"cannot create MongoDB client: {exc}") from exc

    try:
        try:
            collection = client[settings.db_name][settings.collection_name]
        except PyMongoError as exc:
            raise TaskStoreError(f"invalid database or collection name: {exc}") from exc

        try:
            client.admin.command("ping")
        except PyMongoError as exc:
            raise TaskStoreError(f"cannot reach MongoDB: {exc}") from exc

        store = TaskStore(collection, duplicate_policy=settings.duplicate_policy)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "TaskStore ready db=%s collection=%s duplicates=%s total=%s",
                settings.db_name,
                settings.collection_name,
                settings.duplicate_policy,
                store.count_tasks(),
            )
        yield store
    finally:
        client.close()
        logger.debug("MongoDB client closed.")
