# tests/fakes.py

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field

import mongomock
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError


class FailingCollection:
    """
    Collection whose every operation fails like an unreachable server.

    Used to check that driver errors surface as TaskStoreError.
    """

    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or ServerSelectionTimeoutError("localhost:27017: connection refused")
        self.calls: list[str] = []

    def _fail(self, name: str):
        self.calls.append(name)
        raise self.exc

    def find(self, *args, **kwargs):
        return self._fail("find")

    def find_one(self, *args, **kwargs):
        return self._fail("find_one")

    def insert_one(self, *args, **kwargs):
        return self._fail("insert_one")

    def find_one_and_update(self, *args, **kwargs):
        return self._fail("find_one_and_update")

    def delete_one(self, *args, **kwargs):
        return self._fail("delete_one")

    def count_documents(self, *args, **kwargs):
        return self._fail("count_documents")


class _FakeAdmin:
    def __init__(self, client: FakeMongoClient) -> None:
        self._client = client

    def command(self, name: str):
        self._client.commands.append(name)
        if self._client.ping_error is not None:
            raise self._client.ping_error
        return {"ok": 1.0}


@dataclass
class FakeMongoClient:
    """
    Stand-in for pymongo.MongoClient used by bootstrap tests.

    Databases are backed by mongomock; ping can be made to fail.
    """

    uri: str
    kwargs: dict = field(default_factory=dict)
    ping_error: Exception | None = None
    commands: list[str] = field(default_factory=list)
    closed: bool = False
    _backend: mongomock.MongoClient = field(default_factory=mongomock.MongoClient)

    @property
    def admin(self) -> _FakeAdmin:
        return _FakeAdmin(self)

    def __getitem__(self, name: str):
        return self._backend[name]

    def close(self) -> None:
        self.closed = True


class FakeClientFactory:
    """Callable with MongoClient's signature that records the clients it builds."""

    def __init__(self, ping_error: Exception | None = None) -> None:
        self.ping_error = ping_error
        self.clients: list[FakeMongoClient] = []

    def __call__(self, uri: str, **kwargs) -> FakeMongoClient:
        client = FakeMongoClient(uri=uri, kwargs=kwargs, ping_error=self.ping_error)
        self.clients.append(client)
        return client


def auth_failure() -> OperationFailure:
    return OperationFailure("Authentication failed.", code=18)


class StoreOpener:
    """Replacement for open_task_store that hands out a prepared store and counts calls."""

    def __init__(self, store) -> None:
        self.store = store
        self.opened = 0
        self.closed = 0

    @contextmanager
    def __call__(self, settings):
        self.opened += 1
        try:
            yield self.store
        finally:
            self.closed += 1
