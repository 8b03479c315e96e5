"""Reply repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from forum.models.reply import Reply
from forum.repositories.base import BaseRepository


class ReplyRepository(BaseRepository[Reply]):
    """Persistence-only repository for :class:`Reply`."""

    model = Reply

    def _default_eagerload(self, stmt):
        return stmt.options(joinedload(Reply.author))

    def _counter_fields(self):
        return {field: getattr(Reply, field) for field in Reply.COUNTER_FIELDS}

    def list_for_post(self, post_id: int) -> list[Reply]:
        """Return the replies of ``post_id`` in creation order.

        :param post_id: Parent post identifier.
        :type post_id: int
        :returns: Replies, oldest first.
        :rtype: list[Reply]
        """
        stmt = (
            self._default_eagerload(select(Reply))
            .where(Reply.post_id == post_id)
            .order_by(Reply.id.asc())
        )
        return list(self.session.execute(stmt).unique().scalars().all())
