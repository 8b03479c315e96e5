"""Generic reaction endpoint covering posts and replies."""

from __future__ import annotations

from flask import Blueprint, request

from forum.api.deps import current_identity, json_response, reaction_ledger, require_auth, timing
from forum.schemas import ReactionCreateSchema, ReactionResultSchema
from forum.services.reactions.dto import ReactionIn, ReactionKind, TargetType

bp = Blueprint("reactions", __name__)

reaction_create_schema = ReactionCreateSchema()
reaction_result_schema = ReactionResultSchema()


@bp.post("")
@require_auth
@timing
def apply_reaction():
    """Apply a like or dislike and return the target's counters."""

    payload = reaction_create_schema.load(request.get_json(silent=True) or {})
    result = reaction_ledger().apply(
        ReactionIn(
            target_type=TargetType(payload["target_type"]),
            target_id=payload["target_id"],
            kind=ReactionKind(payload["kind"]),
            user_id=current_identity().user_id,
        )
    )
    return json_response({"data": reaction_result_schema.dump(result)})
