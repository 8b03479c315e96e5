"""Idempotent demo data for local development databases."""

from __future__ import annotations

import logging
from typing import Any, cast

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import select
from sqlalchemy.orm import Session

from forum.models.post import Post
from forum.models.reply import Reply
from forum.models.user import User
from forum.services._shared.ports import PasswordHasher

LOGGER = logging.getLogger(__name__)

USER_FIXTURES: list[dict[str, str]] = [
    {"username": "alice", "password": "alicePass123"},
    {"username": "bob", "password": "bobPass123"},
]

POST_FIXTURES: list[dict[str, Any]] = [
    {
        "author": "alice",
        "title": "Welcome to the forum",
        "body": "Introduce yourself and say what brought you here.",
        "replies": [
            {"author": "bob", "body": "Hi all, Bob here."},
        ],
    },
    {
        "author": "bob",
        "title": "Favourite Python testing tools?",
        "body": "pytest, factory_boy, freezegun... what else do you reach for?",
        "replies": [],
    },
]


def _session(database: SQLAlchemy) -> Session:
    """Return the current SQLAlchemy session."""
    return cast(Session, database.session)


def _touch(summary: dict[str, dict[str, int]], table: str, created: bool) -> None:
    """Update summary counters for the given table."""
    entry = summary.setdefault(table, {"created": 0, "existing": 0})
    if created:
        entry["created"] += 1
    else:
        entry["existing"] += 1


def seed_demo(
    database: SQLAlchemy, hasher: PasswordHasher, *, verbose: bool = False
) -> dict[str, dict[str, int]]:
    """Create demo users, posts and replies.

    Users are matched by username, posts by ``(author, title)`` and replies by
    ``(post, author, body)``, so running the seed twice creates nothing new.
    """
    if verbose:
        LOGGER.info("Seeding demo users, posts and replies...")
    session = _session(database)
    summary: dict[str, dict[str, int]] = {}
    users: dict[str, User] = {}

    for fixture in USER_FIXTURES:
        username = fixture["username"]
        user = session.execute(select(User).filter_by(username=username)).scalar_one_or_none()
        created = user is None
        if user is None:
            user = User(username=username, password_hash=hasher.hash(fixture["password"]))
            session.add(user)
            session.flush()
        users[username] = user
        _touch(summary, "users", created)

    for fixture in POST_FIXTURES:
        author = users[fixture["author"]]
        post = session.execute(
            select(Post).filter_by(user_id=author.id, title=fixture["title"])
        ).scalar_one_or_none()
        created = post is None
        if post is None:
            post = Post(title=fixture["title"], body=fixture["body"], user_id=author.id)
            session.add(post)
            session.flush()
        _touch(summary, "posts", created)

        for reply_fixture in fixture["replies"]:
            reply_author = users[reply_fixture["author"]]
            reply = session.execute(
                select(Reply).filter_by(
                    post_id=post.id, user_id=reply_author.id, body=reply_fixture["body"]
                )
            ).scalar_one_or_none()
            created = reply is None
            if reply is None:
                session.add(
                    Reply(post_id=post.id, user_id=reply_author.id, body=reply_fixture["body"])
                )
                session.flush()
            _touch(summary, "replies", created)

    session.commit()
    return summary


__all__ = ["seed_demo", "USER_FIXTURES", "POST_FIXTURES"]
