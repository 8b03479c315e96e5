"""
Unit of Work contract used by the forum services.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from forum.repositories import PostRepository, ReplyRepository, UserRepository


class UnitOfWork(ABC):
    """
    One transaction shared by the ``users``, ``posts`` and ``replies``
    repositories.

    Implementations commit when the ``with`` block exits cleanly and roll back
    when it raises. Read-only implementations refuse to commit at all.
    """

    users: UserRepository
    posts: PostRepository
    replies: ReplyRepository

    def __enter__(self) -> UnitOfWork:
        return self

    @abstractmethod
    def __exit__(self, exc_type, exc, tb) -> None: ...

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...
