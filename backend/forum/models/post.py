"""Post model: a top-level discussion entry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from forum.core.extensions import db

from .base import PKMixin, ReactionCountersMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .reply import Reply
    from .user import User


class Post(PKMixin, ReprMixin, TimestampMixin, ReactionCountersMixin, db.Model):
    """
    Discussion post owned by the user who created it.

    Only the reaction counters change after creation.
    """

    __tablename__ = "posts"

    title: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    author: Mapped[User] = relationship(back_populates="posts", lazy="joined")
    replies: Mapped[list[Reply]] = relationship(
        back_populates="post", lazy="select", order_by="Reply.id"
    )
