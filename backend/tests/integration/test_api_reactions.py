"""HTTP tests for likes and dislikes on posts and replies."""

from __future__ import annotations

from forum.models import Post
from tests.factories.post import PostFactory, ReplyFactory
from tests.factories.user import UserFactory

API = "/api/v1"


def test_like_post_returns_updated_post(client, auth_headers):
    post = PostFactory()
    headers = auth_headers(UserFactory())

    client.post(f"{API}/posts/{post.id}/like", headers=headers)
    resp = client.post(f"{API}/posts/{post.id}/like", headers=headers)

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["id"] == post.id
    assert (data["likes"], data["dislikes"]) == (2, 0)


def test_dislike_reply(client, auth_headers):
    reply = ReplyFactory()

    resp = client.post(f"{API}/replies/{reply.id}/dislike", headers=auth_headers(UserFactory()))

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert (data["likes"], data["dislikes"]) == (0, 1)
    assert data["post_id"] == reply.post_id


def test_generic_reaction_endpoint(client, auth_headers):
    reply = ReplyFactory()

    resp = client.post(
        f"{API}/reactions",
        json={"target_type": "reply", "target_id": reply.id, "kind": "like"},
        headers=auth_headers(UserFactory()),
    )

    assert resp.status_code == 200
    assert resp.get_json()["data"] == {
        "target_type": "reply",
        "target_id": reply.id,
        "likes": 1,
        "dislikes": 0,
    }


def test_unknown_kind_is_validation_error(client, auth_headers):
    post = PostFactory()

    resp = client.post(
        f"{API}/reactions",
        json={"target_type": "post", "target_id": post.id, "kind": "love"},
        headers=auth_headers(UserFactory()),
    )

    assert resp.status_code == 422


def test_missing_target_is_404(client, auth_headers):
    resp = client.post(f"{API}/posts/999999/like", headers=auth_headers(UserFactory()))

    assert resp.status_code == 404


def test_unauthenticated_reaction_changes_nothing(client, session):
    post = PostFactory()

    resp = client.post(f"{API}/posts/{post.id}/like")

    assert resp.status_code == 401
    assert session.get(Post, post.id, populate_existing=True).likes == 0


def test_invalid_token_reaction_changes_nothing(client, session):
    post = PostFactory()

    resp = client.post(
        f"{API}/posts/{post.id}/dislike", headers={"Authorization": "Bearer garbage"}
    )

    assert resp.status_code == 401
    assert resp.get_json()["code"] == "invalid_token"
    assert session.get(Post, post.id, populate_existing=True).dislikes == 0


HUGE_ID = 10**20


def test_oversized_route_ids_are_404(client, auth_headers):
    headers = auth_headers(UserFactory())

    assert client.post(f"{API}/posts/{HUGE_ID}/like", headers=headers).status_code == 404
    assert client.post(f"{API}/replies/{HUGE_ID}/dislike", headers=headers).status_code == 404


def test_oversized_target_id_is_validation_error(client, auth_headers):
    resp = client.post(
        f"{API}/reactions",
        json={"target_type": "post", "target_id": HUGE_ID, "kind": "like"},
        headers=auth_headers(UserFactory()),
    )

    assert resp.status_code == 422
    assert "target_id" in resp.get_json()["details"]["errors"]
