"""
Unit tests for SQLAlchemyUnitOfWork (writer), using factories.
"""

from __future__ import annotations

import pytest
from forum.models import Post, User
from forum.uow import SQLAlchemyUnitOfWork
from tests.factories.user import UserFactory


class TestSQLAlchemyUnitOfWorkWriter:
    def test_exposes_forum_repositories(self, session):
        with SQLAlchemyUnitOfWork() as uow:
            assert uow.users.session is uow.posts.session is uow.replies.session

    def test_writer_uow_commits_on_success(self, app, db, session):
        """
        GIVEN a writer UoW
        WHEN a user is added inside the context and the block exits cleanly
        THEN the row is visible afterwards.
        """
        initial = db.session.query(User).count()

        with SQLAlchemyUnitOfWork() as uow:
            uow.users.add(UserFactory.build())

        assert db.session.query(User).count() == initial + 1

    def test_writer_uow_rolls_back_on_exception(self, app, db, session):
        """
        GIVEN a writer UoW
        WHEN an exception is raised inside the context
        THEN nothing staged in the block is persisted.
        """
        initial = db.session.query(User).count()

        with pytest.raises(RuntimeError), SQLAlchemyUnitOfWork() as uow:
            uow.users.add(UserFactory.build())
            raise RuntimeError("boom")

        assert db.session.query(User).count() == initial

    def test_increment_and_failure_roll_back_together(self, app, db, session):
        author = UserFactory()
        with SQLAlchemyUnitOfWork() as uow:
            post = uow.posts.add(Post(title="t", body="b", user_id=author.id))
            post_id = post.id

        with pytest.raises(RuntimeError), SQLAlchemyUnitOfWork() as uow:
            uow.posts.increment(post_id, "likes", 1)
            raise RuntimeError("abort before commit")

        assert db.session.get(Post, post_id, populate_existing=True).likes == 0
