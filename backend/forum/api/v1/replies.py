"""Reply endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from forum.api.deps import (
    current_identity,
    json_response,
    post_service,
    reaction_ledger,
    require_auth,
    timing,
)
from forum.schemas import ReplyCreateSchema, ReplySchema
from forum.services.posts.dto import ReplyCreateIn
from forum.services.reactions.dto import ReactionIn, ReactionKind, TargetType

bp = Blueprint("replies", __name__)

reply_schema = ReplySchema()
reply_create_schema = ReplyCreateSchema()


@bp.post("")
@require_auth
@timing
def create_reply():
    """Reply to an existing post; 404 when the post does not exist."""

    payload = reply_create_schema.load(request.get_json(silent=True) or {})
    reply = post_service().create_reply(
        ReplyCreateIn(user_id=current_identity().user_id, **payload)
    )
    return json_response({"data": reply_schema.dump(reply)}, status=201)


def _react(reply_id: int, kind: ReactionKind):
    result = reaction_ledger().apply(
        ReactionIn(
            target_type=TargetType.REPLY,
            target_id=reply_id,
            kind=kind,
            user_id=current_identity().user_id,
        )
    )
    return json_response({"data": reply_schema.dump(result.record)})


@bp.post("/<int:reply_id>/like")
@require_auth
@timing
def like_reply(reply_id: int):
    return _react(reply_id, ReactionKind.LIKE)


@bp.post("/<int:reply_id>/dislike")
@require_auth
@timing
def dislike_reply(reply_id: int):
    return _react(reply_id, ReactionKind.DISLIKE)
