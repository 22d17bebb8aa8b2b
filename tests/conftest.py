# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import mongomock
import pytest
from click.testing import CliRunner

from tasker.core.state import AppState
from tasker.tasks.task_models import DuplicatePolicy
from tasker.tasks.task_store import TaskStore


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than the real config,
    to keep unit tests isolated from the developer's environment and .env.
    """
    return SimpleNamespace(
        app_name="tasker-test",
        log_level="WARNING",
        log_dir=None,
        mongo_uri="mongodb://example.invalid:27017/",
        db_name="tasker",
        collection_name="tasks",
        mongo_timeout_ms=None,
        duplicate_policy=DuplicatePolicy.ALLOW,
    )


@pytest.fixture()
def collection():
    """In-memory MongoDB collection; each test gets a fresh client."""
    return mongomock.MongoClient().tasker.tasks


@pytest.fixture()
def store(collection) -> TaskStore:
    return TaskStore(collection)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired with a real TaskStore over mongomock.

    NOTE: The query layer is what the CLI tests exercise end to end,
    so only the server itself is replaced.
    """
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()
