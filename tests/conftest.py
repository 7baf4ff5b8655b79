"""
Shared pytest fixtures.

Each test gets its own SQLite file database under tmp_path, and an app
built from explicit test Settings. The environment is set before the
app module is imported, so its module-level app is built for tests too.
"""
import os

os.environ["APP_ENV"] = "test"
os.environ["LOG_FORMAT"] = "text"

import pytest
from fastapi.testclient import TestClient

from dogs_api.core.config import Settings
from dogs_api.db.base import Base
from dogs_api.main import create_app
from dogs_api.services.dogs import create_dog

REX = {"name": "Rex", "description": "fast", "breed": "lab", "age": 3}


@pytest.fixture()
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'test_dogs.db'}",
        APP_ENV="test",
        LOG_FORMAT="text",
    )


@pytest.fixture()
def app(settings):
    app = create_app(settings)
    Base.metadata.create_all(bind=app.state.engine)
    yield app
    Base.metadata.drop_all(bind=app.state.engine)
    app.state.engine.dispose()


@pytest.fixture()
def db(app):
    db = app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def rex(db):
    """A persisted dog."""
    return create_dog(db, REX)
