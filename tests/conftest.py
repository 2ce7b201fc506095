"""Shared fixtures: a throwaway SQLite database, seeded workspace and clients."""

from __future__ import annotations

import os
import pathlib
import sys
from types import SimpleNamespace

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

TEST_DB_PATH = pathlib.Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ.setdefault("SECRET_KEY", "test")
os.environ.setdefault("APP_TIMEZONE", "UTC")

import pytest
from fastapi.testclient import TestClient

from app.application.event_bus import EventBus
from app.application.subscribers import register_subscribers
from app.infrastructure import database
from app.infrastructure.models import (
    ProjectModel,
    UserModel,
    WorkspaceMemberModel,
    WorkspaceModel,
)
from app.infrastructure.security import create_access_token


@pytest.fixture(autouse=True)
def setup_database():
    """Recreate every table before each test."""

    database.initialize_database()
    database.Base.metadata.drop_all(bind=database.engine)
    database.Base.metadata.create_all(bind=database.engine)
    yield
    database.Base.metadata.drop_all(bind=database.engine)
    database.engine.dispose()
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()


@pytest.fixture()
def session():
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def seed():
    """Create a workspace with two members, an outsider and one project."""

    db = database.SessionLocal()
    try:
        owner = UserModel(name="Ada Lovelace", email="ada@example.com")
        member = UserModel(name="Grace Hopper", email="grace@example.com")
        outsider = UserModel(name="Alan Turing", email="alan@example.com")
        workspace = WorkspaceModel(name="Acme", slug="acme")
        db.add_all([owner, member, outsider, workspace])
        db.flush()

        project = ProjectModel(workspace_id=workspace.id, name="Website", slug="website")
        db.add_all(
            [
                WorkspaceMemberModel(
                    workspace_id=workspace.id, user_id=owner.id, role="owner"
                ),
                WorkspaceMemberModel(workspace_id=workspace.id, user_id=member.id),
                project,
            ]
        )
        db.commit()

        return SimpleNamespace(
            owner_id=owner.id,
            member_id=member.id,
            outsider_id=outsider.id,
            workspace_id=workspace.id,
            project_id=project.id,
        )
    finally:
        db.close()


@pytest.fixture()
def bus() -> EventBus:
    """Return a bus wired with the production subscribers."""

    event_bus = EventBus()
    register_subscribers(event_bus, database.SessionLocal)
    return event_bus


@pytest.fixture()
def auth_headers():
    def _headers(user_id: str) -> dict[str, str]:
        token = create_access_token({"sub": user_id})
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture()
def client(bus: EventBus):
    """Return a test client bound to a fresh application instance."""

    from app.main import create_app

    with TestClient(create_app(event_bus=bus)) as test_client:
        yield test_client
