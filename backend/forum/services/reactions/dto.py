"""
DTOs for the reaction ledger.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from forum.services.posts.dto import PostOut, ReplyOut


class TargetType(str, Enum):
    POST = "post"
    REPLY = "reply"


class ReactionKind(str, Enum):
    LIKE = "like"
    DISLIKE = "dislike"

    @property
    def counter(self) -> str:
        """Name of the counter column this reaction increments."""
        return "likes" if self is ReactionKind.LIKE else "dislikes"


@dataclass(frozen=True, slots=True)
class ReactionIn:
    """
    :param target_type: Kind of record reacted to.
    :type target_type: :class:`TargetType`
    :param target_id: Identifier of the post or reply.
    :type target_id: int
    :param kind: Like or dislike.
    :type kind: :class:`ReactionKind`
    :param user_id: Authenticated caller, used for logging only.
    :type user_id: int | None
    """

    target_type: TargetType
    target_id: int
    kind: ReactionKind
    user_id: int | None = None


@dataclass(frozen=True, slots=True)
class ReactionOut:
    """
    Counters of the target after the reaction was committed.

    ``record`` holds the full updated post or reply.
    """

    target_type: TargetType
    target_id: int
    likes: int
    dislikes: int
    record: PostOut | ReplyOut | None = field(default=None, compare=False)
