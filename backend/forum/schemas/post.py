"""Post and reply schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate

from forum.models.base import MAX_ID


class PostCreateSchema(Schema):
    """Payload for creating a post.

    Any ``user``/``user_id`` key is dropped; the author is the caller.
    """

    class Meta:
        unknown = EXCLUDE

    title = fields.String(required=True, validate=validate.Length(min=1, max=200))
    body = fields.String(required=True, validate=validate.Length(min=1))


class ReplyCreateSchema(Schema):
    """Payload for replying to a post."""

    class Meta:
        unknown = EXCLUDE

    post_id = fields.Integer(
        required=True, strict=True, validate=validate.Range(min=1, max=MAX_ID)
    )
    body = fields.String(required=True, validate=validate.Length(min=1))


class SearchQuerySchema(Schema):
    """``GET /search`` query string."""

    class Meta:
        unknown = EXCLUDE

    q = fields.String(required=True, validate=validate.Length(min=1, max=200))


class PostSchema(Schema):
    """Public representation of a post."""

    id = fields.Integer(required=True)
    title = fields.String(required=True)
    body = fields.String(required=True)
    user_id = fields.Integer(required=True)
    author = fields.String(required=True)
    likes = fields.Integer(required=True)
    dislikes = fields.Integer(required=True)
    created_at = fields.DateTime(allow_none=True)


class ReplySchema(Schema):
    """Public representation of a reply."""

    id = fields.Integer(required=True)
    post_id = fields.Integer(required=True)
    body = fields.String(required=True)
    user_id = fields.Integer(required=True)
    author = fields.String(required=True)
    likes = fields.Integer(required=True)
    dislikes = fields.Integer(required=True)
    created_at = fields.DateTime(allow_none=True)
