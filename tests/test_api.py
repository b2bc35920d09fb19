"""HTTP layer: auth, feed, friends, moderation and password redaction"""
API = "/api/v1"


def contains_key(value, key):
    """True if ``key`` appears anywhere in a decoded JSON document"""
    if isinstance(value, dict):
        return key in value or any(contains_key(v, key) for v in value.values())
    if isinstance(value, list):
        return any(contains_key(v, key) for v in value)
    return False


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "running"
    health = client.get("/health").json()
    assert health["status"] == "healthy"
    assert health["store"]["users"] == 0


def test_register_login_and_me(client, register):
    user_id, headers = register("alice", "Alice")

    me = client.get(f"{API}/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["username"] == "alice"
    assert not contains_key(me.json(), "password")

    login = client.post(f"{API}/auth/login", json={"username": "alice", "password": "secret123"})
    assert login.status_code == 200
    assert login.json()["user_id"] == user_id

    refreshed = client.post(f"{API}/auth/refresh", headers=headers)
    assert refreshed.status_code == 200


def test_login_with_wrong_password(client, register):
    register("alice")
    response = client.post(f"{API}/auth/login", json={"username": "alice", "password": "nope"})
    assert response.status_code == 401
    assert response.json()["code"] == "invalid_credentials"


def test_duplicate_username(client, register):
    register("alice")
    response = client.post(
        f"{API}/auth/register",
        json={"username": "alice", "password": "secret123", "name": "Other"}
    )
    assert response.status_code == 409


def test_requests_without_token_are_unauthorized(client):
    assert client.get(f"{API}/posts").status_code == 401
    bad = {"Authorization": "Bearer not-a-token"}
    assert client.get(f"{API}/friends", headers=bad).status_code == 401


def test_feed_and_friend_flow(client, register):
    alice_id, alice = register("alice", "Alice")
    bob_id, bob = register("bob", "Bob")

    post = client.post(f"{API}/posts", json={"content": "hello"}, headers=alice)
    assert post.status_code == 201
    post_id = post.json()["id"]

    assert [p["id"] for p in client.get(f"{API}/posts", headers=alice).json()["posts"]] == [post_id]
    assert client.get(f"{API}/posts", headers=bob).json()["posts"] == []

    request = client.post(f"{API}/friends/request", json={"friend_id": bob_id}, headers=alice)
    assert request.status_code == 201
    assert request.json()["status"] == "pending"
    request_id = request.json()["id"]

    pending = client.get(f"{API}/friends/requests", headers=bob).json()
    assert pending["total_count"] == 1
    assert pending["requests"][0]["user"]["id"] == alice_id

    status = client.get(f"{API}/friends/status/{alice_id}", headers=bob).json()
    assert status == {"user_id": alice_id, "status": "pending", "request_id": request_id, "is_requester": False}

    accepted = client.put(f"{API}/friends/request/{request_id}/accept", headers=bob)
    assert accepted.json()["status"] == "accepted"

    friends = client.get(f"{API}/friends", headers=alice).json()
    assert [f["user"]["id"] for f in friends["friends"]] == [bob_id]
    assert client.get(f"{API}/friends/check/{alice_id}", headers=bob).json()["is_friend"] is True
    assert client.get(f"{API}/friends/count", headers=bob).json() == {"count": 1}

    like = client.post(f"{API}/posts/{post_id}/like", headers=bob)
    assert like.status_code == 201
    assert like.json()["count"] == 1
    assert client.post(f"{API}/posts/{post_id}/like", headers=bob).status_code == 400

    comment = client.post(f"{API}/posts/{post_id}/comments", json={"content": "hey"}, headers=bob)
    assert comment.status_code == 201
    assert comment.json()["author"]["username"] == "bob"

    alice_view = client.get(f"{API}/posts", headers=alice).json()["posts"][0]
    bob_view = client.get(f"{API}/posts", headers=bob).json()["posts"][0]
    assert (alice_view["likes"], alice_view["liked"]) == (1, False)
    assert bob_view["liked"] is True
    assert [c["content"] for c in bob_view["comments"]] == ["hey"]

    unlike = client.delete(f"{API}/posts/{post_id}/like", headers=bob)
    assert unlike.json() == {"success": True, "count": 0}
    assert client.delete(f"{API}/posts/{post_id}/like", headers=bob).json()["count"] == 0


def test_friend_request_errors(client, register):
    alice_id, alice = register("alice")
    bob_id, bob = register("bob")

    self_request = client.post(f"{API}/friends/request", json={"friend_id": alice_id}, headers=alice)
    assert self_request.status_code == 400
    assert self_request.json()["code"] == "self_request"

    unknown = client.post(f"{API}/friends/request", json={"friend_id": 99}, headers=alice)
    assert unknown.status_code == 404

    client.post(f"{API}/friends/request", json={"friend_id": bob_id}, headers=alice)
    reverse = client.post(f"{API}/friends/request", json={"friend_id": alice_id}, headers=bob)
    assert reverse.status_code == 400
    assert reverse.json()["code"] == "duplicate_request"

    assert client.put(f"{API}/friends/request/99/accept", headers=bob).status_code == 404
    assert client.put(f"{API}/friends/request/99/reject", headers=bob).status_code == 404


def test_post_and_comment_lookups(client, register):
    alice_id, alice = register("alice")

    assert client.post(f"{API}/posts", json={"content": ""}, headers=alice).status_code == 422
    assert client.post(f"{API}/posts", json={"content": "   "}, headers=alice).status_code == 400
    assert client.get(f"{API}/posts/5/comments", headers=alice).status_code == 404
    assert client.post(f"{API}/posts/5/like", headers=alice).status_code == 404

    client.post(f"{API}/posts", json={"content": "one"}, headers=alice)
    client.post(f"{API}/posts", json={"content": "two"}, headers=alice)
    posts = client.get(f"{API}/posts/user/{alice_id}", headers=alice).json()
    assert [p["content"] for p in posts] == ["two", "one"]


def test_user_profile_endpoints(client, register):
    alice_id, alice = register("alice", "Alice")
    register("bob")

    updated = client.put(f"{API}/users/me", json={"bio": "hi"}, headers=alice)
    assert updated.json()["bio"] == "hi"
    assert client.put(f"{API}/users/me", json={"username": "bob"}, headers=alice).status_code == 409

    profile = client.get(f"{API}/users/{alice_id}", headers=alice)
    assert profile.json()["name"] == "Alice"
    assert client.get(f"{API}/users/99", headers=alice).status_code == 404


def test_admin_requires_admin_user(client, register):
    register("admin")
    _, bob = register("bob")
    assert client.get(f"{API}/admin/users", headers=bob).status_code == 403


def test_admin_moderation(client, register):
    admin_id, admin = register("admin", "Admin")
    bob_id, bob = register("bob", "Bob")

    post_id = client.post(f"{API}/posts", json={"content": "spam"}, headers=bob).json()["id"]
    client.post(f"{API}/posts/{post_id}/like", headers=admin)

    posts = client.get(f"{API}/admin/posts", headers=admin).json()
    assert posts[0]["likes_count"] == 1
    assert posts[0]["author"]["id"] == bob_id

    assert client.delete(f"{API}/admin/posts/{post_id}", headers=admin).json()["success"] is True
    assert client.delete(f"{API}/admin/posts/{post_id}", headers=admin).status_code == 404

    users = client.get(f"{API}/admin/users", headers=admin).json()
    assert [u["name"] for u in users] == ["Admin", "Bob"]

    assert client.put(f"{API}/admin/users/{admin_id}/ban", headers=admin).status_code == 400
    assert client.delete(f"{API}/admin/users/{admin_id}", headers=admin).status_code == 400

    banned = client.put(f"{API}/admin/users/{bob_id}/ban", headers=admin)
    assert banned.json()["is_banned"] is True
    assert client.get(f"{API}/posts", headers=bob).status_code == 403
    login = client.post(f"{API}/auth/login", json={"username": "bob", "password": "secret123"})
    assert login.status_code == 403

    assert client.delete(f"{API}/admin/users/{bob_id}", headers=admin).status_code == 200
    assert client.delete(f"{API}/admin/users/{bob_id}", headers=admin).status_code == 404


def test_password_never_leaves_the_server(client, register):
    alice_id, alice = register("alice")
    bob_id, bob = register("bob")

    post_id = client.post(f"{API}/posts", json={"content": "hi"}, headers=alice).json()["id"]
    request_id = client.post(f"{API}/friends/request", json={"friend_id": bob_id}, headers=alice).json()["id"]
    pending = client.get(f"{API}/friends/requests", headers=bob)
    client.put(f"{API}/friends/request/{request_id}/accept", headers=bob)
    client.post(f"{API}/posts/{post_id}/comments", json={"content": "yo"}, headers=bob)

    responses = [
        pending,
        client.get(f"{API}/friends", headers=alice),
        client.get(f"{API}/posts", headers=bob),
        client.get(f"{API}/posts/{post_id}/comments", headers=alice),
        client.get(f"{API}/users/{bob_id}", headers=alice),
        client.get(f"{API}/users/me", headers=alice),
        client.get(f"{API}/admin/users", headers=alice),
        client.get(f"{API}/admin/posts", headers=alice),
    ]
    for response in responses:
        assert response.status_code == 200, response.text
        assert not contains_key(response.json(), "password")
