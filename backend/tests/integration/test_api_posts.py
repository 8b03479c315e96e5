"""HTTP tests for posts, replies and title search."""

from __future__ import annotations

from tests.factories.post import PostFactory, ReplyFactory
from tests.factories.user import UserFactory

API = "/api/v1"


class TestPosts:
    def test_create_post_is_owned_by_caller(self, client, auth_headers):
        author = UserFactory(username="ivy")
        other = UserFactory()

        resp = client.post(
            f"{API}/posts",
            json={"title": "Hello", "body": "World", "user_id": other.id, "user": "someone"},
            headers=auth_headers(author),
        )

        assert resp.status_code == 201
        data = resp.get_json()["data"]
        assert data["user_id"] == author.id
        assert data["author"] == "ivy"
        assert (data["likes"], data["dislikes"]) == (0, 0)

    def test_create_post_requires_token(self, client):
        resp = client.post(f"{API}/posts", json={"title": "t", "body": "b"})

        assert resp.status_code == 401

    def test_create_post_rejects_blank_title(self, client, auth_headers):
        user = UserFactory()

        resp = client.post(
            f"{API}/posts", json={"title": "   ", "body": "b"}, headers=auth_headers(user)
        )

        assert resp.status_code == 422

    def test_list_posts_newest_first(self, client):
        older = PostFactory()
        newer = PostFactory()

        resp = client.get(f"{API}/posts")

        assert resp.status_code == 200
        ids = [p["id"] for p in resp.get_json()["data"]]
        assert ids.index(newer.id) < ids.index(older.id)

    def test_get_post(self, client):
        post = PostFactory(title="Specific")

        resp = client.get(f"{API}/posts/{post.id}")

        assert resp.status_code == 200
        assert resp.get_json()["data"]["title"] == "Specific"

    def test_get_missing_post_is_404(self, client):
        resp = client.get(f"{API}/posts/999999")

        assert resp.status_code == 404
        assert resp.get_json()["code"] == "not_found"

    def test_get_oversized_post_id_is_404(self, client):
        resp = client.get(f"{API}/posts/99999999999999999999")

        assert resp.status_code == 404
        assert client.get(f"{API}/posts/99999999999999999999/replies").status_code == 404


class TestReplies:
    def test_reply_to_existing_post(self, client, auth_headers):
        post = PostFactory()
        user = UserFactory()

        resp = client.post(
            f"{API}/replies",
            json={"post_id": post.id, "body": "Agreed"},
            headers=auth_headers(user),
        )

        assert resp.status_code == 201
        data = resp.get_json()["data"]
        assert data["post_id"] == post.id
        assert data["user_id"] == user.id

    def test_reply_to_missing_post_is_404(self, client, auth_headers):
        user = UserFactory()

        resp = client.post(
            f"{API}/replies",
            json={"post_id": 999999, "body": "Anyone?"},
            headers=auth_headers(user),
        )

        assert resp.status_code == 404

    def test_list_replies_oldest_first(self, client):
        post = PostFactory()
        first = ReplyFactory(post=post)
        second = ReplyFactory(post=post)
        ReplyFactory()  # other post

        resp = client.get(f"{API}/posts/{post.id}/replies")

        assert resp.status_code == 200
        assert [r["id"] for r in resp.get_json()["data"]] == [first.id, second.id]

    def test_list_replies_of_missing_post_is_404(self, client):
        assert client.get(f"{API}/posts/999999/replies").status_code == 404


class TestSearch:
    def test_search_is_case_insensitive_on_title(self, client):
        hit = PostFactory(title="Flask Tips and Tricks")
        PostFactory(title="Something else", body="flask in the body only")

        resp = client.get(f"{API}/search", query_string={"q": "flask"})

        assert resp.status_code == 200
        assert [p["id"] for p in resp.get_json()["data"]] == [hit.id]

    def test_search_treats_wildcards_literally(self, client):
        PostFactory(title="100 percent")
        hit = PostFactory(title="100% sure")

        resp = client.get(f"{API}/search", query_string={"q": "100%"})

        assert [p["id"] for p in resp.get_json()["data"]] == [hit.id]

    def test_missing_query_is_validation_error(self, client):
        assert client.get(f"{API}/search").status_code == 422

    def test_empty_query_is_validation_error(self, client):
        assert client.get(f"{API}/search", query_string={"q": ""}).status_code == 422


def test_health(client):
    resp = client.get(f"{API}/health")

    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"
    assert resp.get_json()["db"] == "ok"
