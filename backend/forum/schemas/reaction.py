"""Reaction schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate

from forum.models.base import MAX_ID

TARGET_TYPES = ("post", "reply")
REACTION_KINDS = ("like", "dislike")


class ReactionCreateSchema(Schema):
    """Payload for ``POST /reactions``."""

    class Meta:
        unknown = EXCLUDE

    target_type = fields.String(required=True, validate=validate.OneOf(TARGET_TYPES))
    target_id = fields.Integer(
        required=True, strict=True, validate=validate.Range(min=1, max=MAX_ID)
    )
    kind = fields.String(required=True, validate=validate.OneOf(REACTION_KINDS))


class ReactionResultSchema(Schema):
    """Counters of a target after a reaction."""

    target_type = fields.Function(lambda obj: obj.target_type.value)
    target_id = fields.Integer(required=True)
    likes = fields.Integer(required=True)
    dislikes = fields.Integer(required=True)
