"""
DTOs for PostService.

Owner ids always come from the authenticated identity; the HTTP layer never
copies them from a request body.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

# --------------------------------------------------------------------------- #
# Input DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class PostCreateIn:
    """
    :param user_id: Authenticated author.
    :param title: Post title.
    :param body: Post content.
    """

    user_id: int
    title: str
    body: str


@dataclass(frozen=True, slots=True)
class ReplyCreateIn:
    """
    :param user_id: Authenticated author.
    :param post_id: Parent post; must exist.
    :param body: Reply content.
    """

    user_id: int
    post_id: int
    body: str


@dataclass(frozen=True, slots=True)
class PostSearchIn:
    """
    :param query: Case-insensitive substring to look for in titles.
    """

    query: str


# --------------------------------------------------------------------------- #
# Output DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class PostOut:
    id: int
    title: str
    body: str
    user_id: int
    author: str
    likes: int
    dislikes: int
    created_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class ReplyOut:
    id: int
    post_id: int
    body: str
    user_id: int
    author: str
    likes: int
    dislikes: int
    created_at: datetime | None = None
