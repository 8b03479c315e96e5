"""
ReactionLedger
==============

Applies like/dislike reactions to posts and replies.

Each reaction is one ``UPDATE ... SET <counter> = <counter> + 1`` followed by a
re-read in the same transaction. No application-level lock is taken: the
database serializes concurrent updates of the same row, so N concurrent likes
always add exactly N.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from forum.services._shared.base import BaseService
from forum.services._shared.errors import PersistenceError, TargetNotFoundError
from forum.services.posts.service import to_post_out, to_reply_out
from forum.services.reactions.dto import ReactionIn, ReactionKind, ReactionOut, TargetType

logger = logging.getLogger(__name__)


class ReactionLedger(BaseService):
    """Counter-mutation protocol for post and reply reactions."""

    def apply(self, dto: ReactionIn) -> ReactionOut:
        """
        Increment the counter selected by ``dto.kind`` on the target.

        :param dto: Reaction input.
        :type dto: :class:`ReactionIn`
        :returns: Counters after the increment, plus the updated record.
        :rtype: :class:`ReactionOut`
        :raises TargetNotFoundError: If the target does not exist (nothing is written).
        :raises PersistenceError: If the storage backend fails; not retried.
        """
        target_type = TargetType(dto.target_type)
        kind = ReactionKind(dto.kind)

        try:
            with self.rw_uow() as uow:
                repo = uow.posts if target_type is TargetType.POST else uow.replies
                record = repo.increment(dto.target_id, kind.counter, 1)
                if record is None:
                    raise TargetNotFoundError(target_type.value.capitalize(), dto.target_id)
                out = ReactionOut(
                    target_type=target_type,
                    target_id=record.id,
                    likes=record.likes,
                    dislikes=record.dislikes,
                    record=(
                        to_post_out(record)
                        if target_type is TargetType.POST
                        else to_reply_out(record)
                    ),
                )
        except SQLAlchemyError as exc:
            logger.error(
                "reaction.failed",
                extra={
                    "target_type": target_type.value,
                    "target_id": dto.target_id,
                    "kind": kind.value,
                },
                exc_info=True,
            )
            raise PersistenceError() from exc

        logger.info(
            "reaction.applied",
            extra={
                "target_type": target_type.value,
                "target_id": out.target_id,
                "kind": kind.value,
                "user_id": dto.user_id,
                "likes": out.likes,
                "dislikes": out.dislikes,
            },
        )
        return out
