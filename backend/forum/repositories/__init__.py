"""Repositories for users, posts and replies."""

from __future__ import annotations

from forum.repositories.base import BaseRepository, escape_like
from forum.repositories.post import PostRepository
from forum.repositories.reply import ReplyRepository
from forum.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "escape_like",
    "PostRepository",
    "ReplyRepository",
    "UserRepository",
]
