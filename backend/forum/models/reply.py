"""Reply model: a response attached to a post."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from forum.core.extensions import db

from .base import PKMixin, ReactionCountersMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .post import Post
    from .user import User


class Reply(PKMixin, ReprMixin, TimestampMixin, ReactionCountersMixin, db.Model):
    """Reply to a post; the parent post is checked to exist at creation time."""

    __tablename__ = "replies"

    post_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)

    post: Mapped[Post] = relationship(back_populates="replies")
    author: Mapped[User] = relationship(back_populates="replies", lazy="joined")
