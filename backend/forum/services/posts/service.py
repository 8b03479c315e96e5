"""
PostService
===========

Post and reply creation, listing and title search. Reactions on posts and
replies live in :mod:`forum.services.reactions`.
"""

from __future__ import annotations

import logging

from forum.models.post import Post
from forum.models.reply import Reply
from forum.services._shared.base import BaseService
from forum.services._shared.errors import NotFoundError, ValidationError
from forum.services.posts.dto import (
    PostCreateIn,
    PostOut,
    PostSearchIn,
    ReplyCreateIn,
    ReplyOut,
)

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 200


def to_post_out(post: Post) -> PostOut:
    """Map an ORM ``Post`` to :class:`PostOut`."""
    return PostOut(
        id=post.id,
        title=post.title,
        body=post.body,
        user_id=post.user_id,
        author=post.author.username,
        likes=post.likes,
        dislikes=post.dislikes,
        created_at=post.created_at,
    )


def to_reply_out(reply: Reply) -> ReplyOut:
    """Map an ORM ``Reply`` to :class:`ReplyOut`."""
    return ReplyOut(
        id=reply.id,
        post_id=reply.post_id,
        body=reply.body,
        user_id=reply.user_id,
        author=reply.author.username,
        likes=reply.likes,
        dislikes=reply.dislikes,
        created_at=reply.created_at,
    )


def _required_text(value: str | None, field: str) -> str:
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{field} is required.")
    return text


class PostService(BaseService):
    """Use cases around posts and their replies."""

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def create_post(self, dto: PostCreateIn) -> PostOut:
        """
        Create a post owned by ``dto.user_id`` with zeroed counters.

        :raises ValidationError: If title or body is blank.
        """
        title = _required_text(dto.title, "Title")
        body = _required_text(dto.body, "Body")
        if len(title) > TITLE_MAX_LENGTH:
            raise ValidationError(f"Title must be at most {TITLE_MAX_LENGTH} characters.")

        with self.rw_uow() as uow:
            post = uow.posts.add(Post(title=title, body=body, user_id=dto.user_id))
            out = to_post_out(post)

        logger.info("post.created", extra={"post_id": out.id, "user_id": dto.user_id})
        return out

    def create_reply(self, dto: ReplyCreateIn) -> ReplyOut:
        """
        Attach a reply to an existing post.

        :raises ValidationError: If the body is blank.
        :raises NotFoundError: If the parent post does not exist.
        """
        body = _required_text(dto.body, "Body")

        with self.rw_uow() as uow:
            if uow.posts.get(dto.post_id) is None:
                raise NotFoundError("Post", dto.post_id)
            reply = uow.replies.add(Reply(post_id=dto.post_id, body=body, user_id=dto.user_id))
            out = to_reply_out(reply)

        logger.info(
            "reply.created",
            extra={"reply_id": out.id, "post_id": out.post_id, "user_id": dto.user_id},
        )
        return out

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def list_posts(self) -> list[PostOut]:
        """Return every post, newest first."""
        with self.ro_uow() as uow:
            return [to_post_out(p) for p in uow.posts.list_newest_first()]

    def get_post(self, post_id: int) -> PostOut:
        """
        :raises NotFoundError: If no post has ``post_id``.
        """
        with self.ro_uow() as uow:
            post = uow.posts.get(post_id)
            if post is None:
                raise NotFoundError("Post", post_id)
            return to_post_out(post)

    def search(self, dto: PostSearchIn) -> list[PostOut]:
        """
        Posts whose title contains ``dto.query``, ignoring case.

        :raises ValidationError: If the query is blank.
        """
        _required_text(dto.query, "Search query")
        with self.ro_uow() as uow:
            return [to_post_out(p) for p in uow.posts.search_title(dto.query)]

    def list_replies(self, post_id: int) -> list[ReplyOut]:
        """
        Replies of ``post_id`` in creation order.

        :raises NotFoundError: If the post does not exist.
        """
        with self.ro_uow() as uow:
            if uow.posts.get(post_id) is None:
                raise NotFoundError("Post", post_id)
            return [to_reply_out(r) for r in uow.replies.list_for_post(post_id)]
