"""Factory Boy base bound to the per-test SAVEPOINT session."""

from __future__ import annotations

import factory

_bound: dict[str, object] = {}


def bind_session(session) -> None:
    """Point every factory at ``session`` (called by the ``session`` fixture)."""
    _bound["session"] = session


def current_session():
    """Session factories persist into; fails loudly outside the fixture."""
    try:
        return _bound["session"]
    except KeyError:
        raise RuntimeError("No factory session bound; request the 'session' fixture.") from None


class BaseFactory(factory.alchemy.SQLAlchemyModelFactory):
    """Flush, never commit: the test's SAVEPOINT is rolled back afterwards."""

    class Meta:
        abstract = True
        sqlalchemy_session_factory = current_session
        sqlalchemy_session_persistence = "flush"
