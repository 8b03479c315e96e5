"""Unit tests for PostRepository queries."""

from __future__ import annotations

from forum.repositories.post import PostRepository
from forum.repositories.reply import ReplyRepository
from tests.factories.post import PostFactory, ReplyFactory


class TestPostRepository:
    def test_list_newest_first(self, session):
        older = PostFactory()
        newer = PostFactory()

        ids = [p.id for p in PostRepository(session=session).list_newest_first()]

        assert ids.index(newer.id) < ids.index(older.id)

    def test_search_title_matches_substring_ignoring_case(self, session):
        PostFactory(title="Flask tips")
        PostFactory(title="More FLASK")
        PostFactory(title="Django")

        titles = sorted(p.title for p in PostRepository(session=session).search_title("flask"))

        assert titles == ["Flask tips", "More FLASK"]

    def test_search_title_ignores_body(self, session):
        PostFactory(title="Nothing here", body="flask in body only")
        assert PostRepository(session=session).search_title("flask") == []


class TestReplyRepository:
    def test_list_for_post(self, session):
        post = PostFactory()
        first = ReplyFactory(post=post)
        second = ReplyFactory(post=post)

        replies = ReplyRepository(session=session).list_for_post(post.id)

        assert [r.id for r in replies] == [first.id, second.id]
        assert all(r.author is not None for r in replies)
