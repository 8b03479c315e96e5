"""Title search endpoint."""

from __future__ import annotations

from flask import Blueprint, request

from forum.api.deps import json_response, post_service, timing
from forum.schemas import PostSchema, SearchQuerySchema
from forum.services.posts.dto import PostSearchIn

bp = Blueprint("search", __name__)

search_query_schema = SearchQuerySchema()
post_list_schema = PostSchema(many=True)


@bp.get("")
@timing
def search_posts():
    """Posts whose title contains ``q`` (case-insensitive)."""

    args = search_query_schema.load(request.args)
    posts = post_service().search(PostSearchIn(query=args["q"]))
    return json_response({"data": post_list_schema.dump(posts)})
