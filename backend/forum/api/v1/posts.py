"""Post endpoints."""

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
from forum.schemas import PostCreateSchema, PostSchema, ReplySchema
from forum.services.posts.dto import PostCreateIn
from forum.services.reactions.dto import ReactionIn, ReactionKind, TargetType

bp = Blueprint("posts", __name__)

post_schema = PostSchema()
post_list_schema = PostSchema(many=True)
reply_list_schema = ReplySchema(many=True)
post_create_schema = PostCreateSchema()


@bp.get("")
@timing
def list_posts():
    """Return all posts, newest first."""

    posts = post_service().list_posts()
    return json_response({"data": post_list_schema.dump(posts)})


@bp.post("")
@require_auth
@timing
def create_post():
    """Create a post owned by the caller."""

    payload = post_create_schema.load(request.get_json(silent=True) or {})
    post = post_service().create_post(
        PostCreateIn(user_id=current_identity().user_id, **payload)
    )
    return json_response({"data": post_schema.dump(post)}, status=201)


@bp.get("/<int:post_id>")
@timing
def get_post(post_id: int):
    return json_response({"data": post_schema.dump(post_service().get_post(post_id))})


@bp.get("/<int:post_id>/replies")
@timing
def list_replies(post_id: int):
    replies = post_service().list_replies(post_id)
    return json_response({"data": reply_list_schema.dump(replies)})


def _react(post_id: int, kind: ReactionKind):
    result = reaction_ledger().apply(
        ReactionIn(
            target_type=TargetType.POST,
            target_id=post_id,
            kind=kind,
            user_id=current_identity().user_id,
        )
    )
    return json_response({"data": post_schema.dump(result.record)})


@bp.post("/<int:post_id>/like")
@require_auth
@timing
def like_post(post_id: int):
    """Add one like and return the updated post."""

    return _react(post_id, ReactionKind.LIKE)


@bp.post("/<int:post_id>/dislike")
@require_auth
@timing
def dislike_post(post_id: int):
    """Add one dislike and return the updated post."""

    return _react(post_id, ReactionKind.DISLIKE)
