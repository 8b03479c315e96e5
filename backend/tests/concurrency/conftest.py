"""Fixtures for tests that need real concurrent database connections.

The in-memory SAVEPOINT fixtures share one connection, which would serialize
every thread. These tests use a file-backed SQLite database and a dedicated
application instead, with each worker thread pushing its own app context.
"""

from __future__ import annotations

import pytest
from forum.core.config import TestingConfig
from forum.core.extensions import db
from forum.factory import create_app
from forum.models import Post, User


@pytest.fixture(autouse=True)
def _factories_session():
    """No factory session here; data is created through the file-backed app."""
    yield


@pytest.fixture()
def file_app(tmp_path):
    """Application bound to a throwaway SQLite file."""

    class FileBackedConfig(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'forum.db'}"
        SQLALCHEMY_ENGINE_OPTIONS = {"connect_args": {"check_same_thread": False, "timeout": 30}}
        USE_PROXYFIX = False

    app = create_app(FileBackedConfig)
    app.logger.setLevel("WARNING")
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.drop_all()
        db.engine.dispose()


@pytest.fixture()
def seeded(file_app):
    """Create one user and one post; return their ids."""
    with file_app.app_context():
        user = User(username="alice", password_hash="not-used")
        db.session.add(user)
        db.session.flush()
        post = Post(title="Concurrent", body="Like me", user_id=user.id)
        db.session.add(post)
        db.session.commit()
        return {"user_id": user.id, "post_id": post.id}
