"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import LoginSchema, RegisterSchema, TokenResponseSchema, UserSchema
from .post import (
    PostCreateSchema,
    PostSchema,
    ReplyCreateSchema,
    ReplySchema,
    SearchQuerySchema,
)
from .reaction import ReactionCreateSchema, ReactionResultSchema

__all__ = [
    "LoginSchema",
    "RegisterSchema",
    "TokenResponseSchema",
    "UserSchema",
    "PostCreateSchema",
    "PostSchema",
    "ReplyCreateSchema",
    "ReplySchema",
    "SearchQuerySchema",
    "ReactionCreateSchema",
    "ReactionResultSchema",
]
