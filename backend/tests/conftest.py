"""Shared fixtures: one app per run, one rolled-back SAVEPOINT per test."""

from __future__ import annotations

import os

import pytest
from forum.core.config import TestingConfig
from forum.core.extensions import db as _db
from forum.core.extensions import get_password_hasher, get_token_provider
from forum.factory import create_app
from sqlalchemy import event
from sqlalchemy.orm import scoped_session, sessionmaker


class TestConfig(TestingConfig):
    """In-memory SQLite, cheap hashing, no proxy headers."""

    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    USE_PROXYFIX = False


@pytest.fixture(scope="session")
def app():
    # DATABASE_URL from the developer's shell must not reach the test app
    os.environ.pop("DATABASE_URL", None)
    app = create_app(TestConfig)
    app.logger.setLevel("WARNING")
    return app


@pytest.fixture(scope="session")
def db(app):
    """Schema created once; the app context stays pushed for the whole run."""
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope="session")
def connection(db):
    conn = db.engine.connect()
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(scope="function")
def session(db, connection):
    """
    Scoped session bound to ``connection`` inside an outer transaction.

    ``db.session`` is swapped for this session so services and Units of Work
    use it too. A ``commit()`` only releases the current SAVEPOINT; a new one
    is opened straight away and the outer transaction is rolled back at
    teardown.
    """
    outer = connection.begin()
    scoped = scoped_session(sessionmaker(bind=connection, future=True, autoflush=False))
    savepoint = connection.begin_nested()

    @event.listens_for(scoped(), "after_transaction_end")
    def _reopen_savepoint(sess, trans):  # pragma: no cover
        nonlocal savepoint
        if trans.nested and not trans._parent.nested:
            savepoint = connection.begin_nested()

    previous = db.session
    db.session.remove()
    db.session = scoped
    try:
        yield scoped
    finally:
        scoped.remove()
        db.session = previous
        outer.rollback()


@pytest.fixture()
def client(app, session):
    return app.test_client()


@pytest.fixture()
def token_provider(app):
    return get_token_provider()


@pytest.fixture()
def password_hasher(app):
    return get_password_hasher()


@pytest.fixture()
def auth_headers(token_provider):
    """``auth_headers(user)`` -> ``{"Authorization": "Bearer <token>"}``."""

    def _make(user_or_id) -> dict[str, str]:
        user_id = getattr(user_or_id, "id", user_or_id)
        return {"Authorization": f"Bearer {token_provider.issue(user_id).token}"}

    return _make


@pytest.fixture(scope="session")
def faker():
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


@pytest.fixture(autouse=True)
def _factories_session(session):
    """Point every factory at the per-test session."""
    from tests.factories import bind_session

    bind_session(session)
    yield
