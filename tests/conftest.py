# tests/conftest.py

import os

# Base en mémoire + pas de logs SQL : doit être fait avant d'importer l'app
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_ECHO"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session

from app.main import app
from app.db.session import engine
from app.db.repositories.tasks import TaskRepository
from app.features.tasks.services import TaskService


@pytest.fixture(autouse=True)
def reset_db():
    """Tables recréées à chaque test : chaque test part d'une base vide."""
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def session():
    with Session(engine) as s:
        yield s


@pytest.fixture()
def repo(session) -> TaskRepository:
    return TaskRepository(session)


@pytest.fixture()
def service(repo) -> TaskService:
    return TaskService(repo)


@pytest.fixture()
def create_task(client):
    """POST /api/tasks et retourne le JSON créé."""
    def _create(title: str = "Task", **fields):
        resp = client.post("/api/tasks", json={"title": title, **fields})
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _create
