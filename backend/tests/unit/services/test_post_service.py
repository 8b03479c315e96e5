"""Unit tests for :class:`PostService`."""

from __future__ import annotations

import pytest
from forum.services._shared.errors import NotFoundError, ValidationError
from forum.services.posts.dto import PostCreateIn, PostSearchIn, ReplyCreateIn
from forum.services.posts.service import PostService
from tests.factories.post import PostFactory, ReplyFactory
from tests.factories.user import UserFactory


@pytest.fixture()
def service() -> PostService:
    return PostService()


class TestCreate:
    def test_create_post_starts_with_zero_counters(self, service):
        author = UserFactory(username="alice")

        out = service.create_post(PostCreateIn(user_id=author.id, title="Hello", body="World"))

        assert out.id > 0
        assert out.user_id == author.id
        assert out.author == "alice"
        assert (out.likes, out.dislikes) == (0, 0)

    @pytest.mark.parametrize("title, body", [("", "body"), ("   ", "body"), ("title", "")])
    def test_create_post_requires_title_and_body(self, service, title, body):
        author = UserFactory()
        with pytest.raises(ValidationError):
            service.create_post(PostCreateIn(user_id=author.id, title=title, body=body))

    def test_create_reply_on_existing_post(self, service):
        post = PostFactory()
        replier = UserFactory(username="bob")

        out = service.create_reply(ReplyCreateIn(user_id=replier.id, post_id=post.id, body="+1"))

        assert out.post_id == post.id
        assert out.author == "bob"
        assert (out.likes, out.dislikes) == (0, 0)

    def test_create_reply_on_missing_post(self, service):
        replier = UserFactory()
        with pytest.raises(NotFoundError):
            service.create_reply(ReplyCreateIn(user_id=replier.id, post_id=424242, body="hi"))


class TestQueries:
    def test_list_posts_newest_first_with_author(self, service):
        alice = UserFactory(username="alice")
        first = PostFactory(author=alice, title="first")
        second = PostFactory(author=alice, title="second")

        posts = service.list_posts()

        ids = [p.id for p in posts]
        assert ids.index(second.id) < ids.index(first.id)
        assert {p.author for p in posts if p.id in (first.id, second.id)} == {"alice"}

    def test_get_post(self, service):
        post = PostFactory(title="lookup")
        assert service.get_post(post.id).title == "lookup"

    def test_get_missing_post(self, service):
        with pytest.raises(NotFoundError):
            service.get_post(987654)

    def test_search_is_case_insensitive_substring(self, service):
        PostFactory(title="Hello World")
        PostFactory(title="Say HELLO again")
        PostFactory(title="Goodbye")

        titles = {p.title for p in service.search(PostSearchIn(query="hello"))}

        assert titles == {"Hello World", "Say HELLO again"}

    def test_search_treats_wildcards_literally(self, service):
        PostFactory(title="100% sure")
        PostFactory(title="1000 reasons")
        PostFactory(title="snake_case")
        PostFactory(title="snakeXcase")

        assert [p.title for p in service.search(PostSearchIn(query="0%"))] == ["100% sure"]
        assert [p.title for p in service.search(PostSearchIn(query="e_c"))] == ["snake_case"]

    @pytest.mark.parametrize("query", ["", "  "])
    def test_search_rejects_blank_query(self, service, query):
        with pytest.raises(ValidationError):
            service.search(PostSearchIn(query=query))

    def test_list_replies_in_creation_order(self, service):
        post = PostFactory()
        r1 = ReplyFactory(post=post)
        r2 = ReplyFactory(post=post)
        ReplyFactory()  # another post

        assert [r.id for r in service.list_replies(post.id)] == [r1.id, r2.id]

    def test_list_replies_of_missing_post(self, service):
        with pytest.raises(NotFoundError):
            service.list_replies(55555)
