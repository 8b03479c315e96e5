"""Reusable SQLAlchemy mixins shared by domain models (typed 2.0)."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, func
from sqlalchemy.orm import Mapped, declared_attr, mapped_column


class TimestampMixin:
    """Provide ``created_at`` and ``updated_at`` timestamp columns.

    Attributes
    ----------
    created_at:
        Timezone-aware timestamp filled by the database on insert.
    updated_at:
        Timezone-aware timestamp refreshed by the database on update.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


# Largest value a 32-bit signed INTEGER primary key can hold
MAX_ID = 2**31 - 1


class PKMixin:
    """Expose an integer surrogate primary key column named ``id`` (1..MAX_ID)."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True)


class ReactionCountersMixin:
    """Provide the ``likes``/``dislikes`` counters of a reaction target.

    Counters start at zero and are only ever changed through
    :meth:`forum.repositories.base.BaseRepository.increment`, which issues a
    single ``UPDATE ... SET col = col + delta``.
    """

    COUNTER_FIELDS = frozenset({"likes", "dislikes"})

    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    dislikes: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    @declared_attr.directive
    def __table_args__(cls) -> tuple:
        return (
            CheckConstraint("likes >= 0", name="likes_non_negative"),
            CheckConstraint("dislikes >= 0", name="dislikes_non_negative"),
        )


class ReprMixin:
    """Provide a concise ``__repr__`` including the class name and id."""

    def __repr__(self) -> str:
        """Return a short and useful string representation.

        :returns: Debug-friendly ``<ClassName id=...>``.
        :rtype: str
        """
        cls = self.__class__.__name__
        key = getattr(self, "id", None)
        return f"<{cls} id={key}>"
