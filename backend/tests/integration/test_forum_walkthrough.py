"""End-to-end walkthrough: register, log in, post, react."""

from __future__ import annotations

API = "/api/v1"


def test_register_login_post_and_like(client):
    resp = client.post(f"{API}/auth/register", json={"username": "alice", "password": "pw123"})
    assert resp.status_code == 201

    resp = client.post(f"{API}/auth/login", json={"username": "alice", "password": "wrongpw"})
    assert resp.status_code == 401

    resp = client.post(f"{API}/auth/login", json={"username": "alice", "password": "pw123"})
    assert resp.status_code == 200
    headers = {"Authorization": f"Bearer {resp.get_json()['data']['access_token']}"}

    resp = client.post(
        f"{API}/posts", json={"title": "First post", "body": "Hello forum"}, headers=headers
    )
    assert resp.status_code == 201
    post = resp.get_json()["data"]
    assert (post["likes"], post["dislikes"]) == (0, 0)
    assert post["author"] == "alice"

    for _ in range(2):
        assert client.post(f"{API}/posts/{post['id']}/like", headers=headers).status_code == 200

    resp = client.get(f"{API}/posts/{post['id']}")
    assert resp.get_json()["data"]["likes"] == 2
