"""Factories for :class:`forum.models.post.Post` and :class:`forum.models.reply.Reply`."""

from __future__ import annotations

from forum.models.post import Post
from forum.models.reply import Reply

import factory
from tests.factories import BaseFactory
from tests.factories.user import UserFactory


class PostFactory(BaseFactory):
    """Build persisted posts with zeroed counters."""

    class Meta:
        model = Post

    id = None
    author = factory.SubFactory(UserFactory)
    user_id = factory.SelfAttribute("author.id")
    title = factory.Sequence(lambda n: f"Post title {n}")
    body = factory.Faker("paragraph")
    likes = 0
    dislikes = 0


class ReplyFactory(BaseFactory):
    """Build persisted replies attached to a fresh post by default."""

    class Meta:
        model = Reply

    id = None
    post = factory.SubFactory(PostFactory)
    post_id = factory.SelfAttribute("post.id")
    author = factory.SubFactory(UserFactory)
    user_id = factory.SelfAttribute("author.id")
    body = factory.Faker("sentence")
    likes = 0
    dislikes = 0
