"""Post repository: listing, title search and reaction counters."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from forum.models.post import Post
from forum.repositories.base import LIKE_ESCAPE, BaseRepository, escape_like


class PostRepository(BaseRepository[Post]):
    """Persistence-only repository for :class:`Post`."""

    model = Post

    def _default_eagerload(self, stmt):
        return stmt.options(joinedload(Post.author))

    def _counter_fields(self):
        return {field: getattr(Post, field) for field in Post.COUNTER_FIELDS}

    # ------------------------------ Queries ------------------------------

    def list_newest_first(self) -> list[Post]:
        """Return posts ordered from newest to oldest.

        :returns: Posts, most recent first.
        :rtype: list[Post]
        """
        stmt = self._default_eagerload(select(Post)).order_by(Post.id.desc())
        return list(self.session.execute(stmt).unique().scalars().all())

    def search_title(self, query: str) -> list[Post]:
        """Case-insensitive substring match on ``title``.

        ``%`` and ``_`` in ``query`` are matched literally.

        :param query: Text to look for inside post titles.
        :type query: str
        :returns: Matching posts, most recent first.
        :rtype: list[Post]
        """
        pattern = f"%{escape_like(query)}%"
        stmt: Any = (
            self._default_eagerload(select(Post))
            .where(Post.title.ilike(pattern, escape=LIKE_ESCAPE))
            .order_by(Post.id.desc())
        )
        return list(self.session.execute(stmt).unique().scalars().all())
