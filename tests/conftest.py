from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlmodel import Session

from todo_app.config import Settings
from todo_app.main import create_app
from todo_app.store import TaskStore


@pytest.fixture()
def db_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'todo.db'}"


@pytest.fixture()
def store(db_url: str):
    task_store = TaskStore(db_url)
    yield task_store
    task_store.close()


@pytest.fixture()
def client(store: TaskStore):
    app = create_app(store=store, settings=Settings(database_url="sqlite://"))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def broken_commit(monkeypatch):
    """Make every session commit fail like a full or locked disk."""

    def fail(self):
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(Session, "commit", fail)


@pytest.fixture()
def broken_reads(monkeypatch):
    """Make every query fail."""

    def fail(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(Session, "exec", fail)
