"""Tests for model-level normalization and constraints."""

from __future__ import annotations

import pytest
from forum.models import Post, User
from sqlalchemy.exc import IntegrityError
from tests.factories.post import PostFactory, ReplyFactory
from tests.factories.user import UserFactory


class TestUserModel:
    def test_username_is_stripped(self):
        user = User(username="  alice  ", password_hash="x")
        assert user.username == "alice"

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_blank_username_is_rejected(self, value):
        with pytest.raises(ValueError):
            User(username=value, password_hash="x")

    def test_username_is_unique(self, session):
        UserFactory(username="dup")
        with pytest.raises(IntegrityError):
            UserFactory(username="dup")

    def test_created_at_is_filled_by_database(self, session):
        user = UserFactory()
        session.refresh(user)
        assert user.created_at is not None

    def test_repr_is_short(self):
        assert repr(User(username="x", password_hash="h")) == "<User id=None>"


class TestReactionTargets:
    def test_new_post_starts_with_zero_counters(self, session):
        author = UserFactory()
        post = Post(title="t", body="b", user_id=author.id)
        session.add(post)
        session.flush()

        assert (post.likes, post.dislikes) == (0, 0)

    def test_negative_counter_violates_check_constraint(self, session):
        post = PostFactory()
        post.likes = -1
        with pytest.raises(IntegrityError):
            session.flush()

    def test_post_replies_are_ordered_oldest_first(self, session):
        post = PostFactory()
        first = ReplyFactory(post=post)
        second = ReplyFactory(post=post)
        session.expire(post, ["replies"])

        assert [r.id for r in post.replies] == [first.id, second.id]
