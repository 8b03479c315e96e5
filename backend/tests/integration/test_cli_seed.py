"""Tests for the ``flask seed`` command group."""

from __future__ import annotations

from forum.models import Post, Reply, User
from forum.seeds.seed_data import POST_FIXTURES, USER_FIXTURES


def test_seed_demo_is_idempotent(app, session):
    runner = app.test_cli_runner()

    first = runner.invoke(args=["seed", "demo"])
    second = runner.invoke(args=["seed", "--verbose", "demo"])

    assert first.exit_code == 0, first.output
    assert second.exit_code == 0, second.output
    assert "users: 2 created, 0 existing" in first.output
    assert "users: 0 created, 2 existing" in second.output
    assert "replies: 0 created, 1 existing" in second.output
    assert session.query(User).count() == len(USER_FIXTURES)
    assert session.query(Post).count() == len(POST_FIXTURES)
    assert session.query(Reply).count() == sum(len(p["replies"]) for p in POST_FIXTURES)


def test_seeded_users_can_log_in(app, client):
    app.test_cli_runner().invoke(args=["seed", "demo"])
    creds = USER_FIXTURES[0]

    resp = client.post("/api/v1/auth/login", json=creds)

    assert resp.status_code == 200


def test_seed_refuses_production(app, monkeypatch):
    monkeypatch.setitem(app.config, "APP_ENV", "production")

    result = app.test_cli_runner().invoke(args=["seed", "demo"])

    assert result.exit_code != 0
    assert "restricted to development" in result.output
    assert "production" in result.output
