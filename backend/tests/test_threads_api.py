"""
HTTP tests for the /threads endpoints.

The app runs on in-memory repositories (see conftest.py), so these cover the
full path: auth -> router -> use case -> repository -> error translation.
"""

from fastapi.testclient import TestClient


def _add_thread(client, headers, title="sebuah thread", body="sebuah body thread"):
    response = client.post(
        "/threads", json={"title": title, "body": body}, headers=headers
    )
    assert response.status_code == 201
    return response.json()["data"]["addedThread"]["id"]


def _add_comment(client, headers, thread_id, content="sebuah comment"):
    response = client.post(
        f"/threads/{thread_id}/comments", json={"content": content}, headers=headers
    )
    assert response.status_code == 201
    return response.json()["data"]["addedComment"]["id"]


class TestPostThreads:
    def test_creates_thread(self, client, auth_headers):
        response = client.post(
            "/threads",
            json={"title": "sebuah thread", "body": "sebuah body thread"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        added = body["data"]["addedThread"]
        assert added["id"].startswith("thread-")
        assert added["title"] == "sebuah thread"
        assert added["owner"] == "user-123"

    def test_missing_property_is_400(self, client, auth_headers):
        response = client.post(
            "/threads", json={"title": "sebuah thread"}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json() == {
            "status": "fail",
            "message": "tidak dapat membuat thread baru karena properti yang dibutuhkan tidak ada",
        }

    def test_empty_body_is_400(self, client, auth_headers):
        response = client.post("/threads", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["status"] == "fail"

    def test_wrong_type_is_400(self, client, auth_headers):
        response = client.post(
            "/threads", json={"title": 123, "body": "body"}, headers=auth_headers
        )

        assert response.status_code == 400
        assert (
            response.json()["message"]
            == "tidak dapat membuat thread baru karena tipe data tidak sesuai"
        )

    def test_title_over_limit_is_400(self, client, auth_headers):
        response = client.post(
            "/threads", json={"title": "a" * 51, "body": "body"}, headers=auth_headers
        )

        assert response.status_code == 400
        assert "batas maksimal" in response.json()["message"]

    def test_non_object_body_is_400(self, client, auth_headers):
        response = client.post("/threads", json=["a", "b"], headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["status"] == "fail"

    def test_requires_authentication(self, client):
        response = client.post("/threads", json={"title": "t", "body": "b"})

        assert response.status_code == 401
        assert response.json()["status"] == "fail"

    def test_rejects_expired_token(self, client, access_token):
        headers = {"Authorization": f"Bearer {access_token(expires_in=-60)}"}

        response = client.post("/threads", json={"title": "t", "body": "b"}, headers=headers)

        assert response.status_code == 401
        assert response.json()["message"] == "Token has expired"

    def test_rejects_token_with_wrong_key(self, client):
        headers = {"Authorization": "Bearer not-a-jwt"}

        response = client.post("/threads", json={"title": "t", "body": "b"}, headers=headers)

        assert response.status_code == 401


class TestGetThread:
    def test_returns_thread_with_redacted_sorted_comments(
        self, client, auth_headers, access_token
    ):
        thread_id = _add_thread(client, auth_headers)
        first = _add_comment(client, auth_headers, thread_id, "comment pertama")
        john = {"Authorization": f"Bearer {access_token('user-456', 'john')}"}
        second = _add_comment(client, john, thread_id, "comment kedua")
        client.delete(f"/threads/{thread_id}/comments/{first}", headers=auth_headers)

        response = client.get(f"/threads/{thread_id}")

        assert response.status_code == 200
        thread = response.json()["data"]["thread"]
        assert thread["id"] == thread_id
        assert thread["title"] == "sebuah thread"
        assert thread["body"] == "sebuah body thread"
        assert thread["username"] == "dicoding"
        assert [c["id"] for c in thread["comments"]] == [first, second]
        assert thread["comments"][0]["content"] == "**komentar telah dihapus**"
        assert thread["comments"][1]["content"] == "comment kedua"
        assert thread["comments"][1]["username"] == "john"
        for comment in thread["comments"]:
            assert "is_delete" not in comment

    def test_thread_without_comments(self, client, auth_headers):
        thread_id = _add_thread(client, auth_headers)

        response = client.get(f"/threads/{thread_id}")

        assert response.json()["data"]["thread"]["comments"] == []

    def test_unknown_thread_is_404(self, client):
        response = client.get("/threads/thread-xxx")

        assert response.status_code == 404
        assert response.json() == {
            "status": "fail",
            "message": "thread tidak ditemukan",
        }


class TestPostComments:
    def test_adds_comment(self, client, auth_headers):
        thread_id = _add_thread(client, auth_headers)

        response = client.post(
            f"/threads/{thread_id}/comments",
            json={"content": "sebuah comment"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        added = response.json()["data"]["addedComment"]
        assert added["id"].startswith("comment-")
        assert added["content"] == "sebuah comment"
        assert added["owner"] == "user-123"

    def test_unknown_thread_is_404(self, client, auth_headers):
        response = client.post(
            "/threads/thread-xxx/comments",
            json={"content": "sebuah comment"},
            headers=auth_headers,
        )

        assert response.status_code == 404

    def test_invalid_content_is_400_even_for_unknown_thread(
        self, client, auth_headers, comment_repository
    ):
        response = client.post(
            "/threads/thread-xxx/comments", json={"content": 1}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["message"] == "content harus string"
        assert comment_repository.comments == {}


class TestDeleteComment:
    def test_owner_can_delete(self, client, auth_headers, comment_repository):
        thread_id = _add_thread(client, auth_headers)
        comment_id = _add_comment(client, auth_headers, thread_id)

        response = client.delete(
            f"/threads/{thread_id}/comments/{comment_id}", headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json() == {"status": "success"}
        row = comment_repository.comments[comment_id]
        assert row["is_delete"] is True
        assert row["content"] == "sebuah comment"

    def test_deleting_twice_succeeds(self, client, auth_headers):
        thread_id = _add_thread(client, auth_headers)
        comment_id = _add_comment(client, auth_headers, thread_id)
        url = f"/threads/{thread_id}/comments/{comment_id}"

        assert client.delete(url, headers=auth_headers).status_code == 200
        assert client.delete(url, headers=auth_headers).status_code == 200

    def test_other_user_is_403(self, client, auth_headers, access_token):
        thread_id = _add_thread(client, auth_headers)
        comment_id = _add_comment(client, auth_headers, thread_id)
        john = {"Authorization": f"Bearer {access_token('user-456', 'john')}"}

        response = client.delete(
            f"/threads/{thread_id}/comments/{comment_id}", headers=john
        )

        assert response.status_code == 403
        assert response.json()["message"] == "kamu tidak punya akses untuk komentar ini"

    def test_unknown_comment_is_404(self, client, auth_headers):
        thread_id = _add_thread(client, auth_headers)

        response = client.delete(
            f"/threads/{thread_id}/comments/comment-xxx", headers=auth_headers
        )

        assert response.status_code == 404
        assert response.json()["message"] == "komentar tidak ditemukan"

    def test_unknown_thread_is_404(self, client, auth_headers):
        response = client.delete(
            "/threads/thread-xxx/comments/comment-xxx", headers=auth_headers
        )

        assert response.status_code == 404
        assert response.json()["message"] == "thread tidak ditemukan"


def test_unexpected_error_is_generic_500(app, thread_repository, monkeypatch):
    async def explode(self, thread_id):
        raise RuntimeError("database is on fire")

    monkeypatch.setattr(type(thread_repository), "get_thread_by_id", explode)
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/threads/thread-123")

    assert response.status_code == 500
    assert response.json() == {
        "status": "error",
        "message": "terjadi kegagalan pada server kami",
    }


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_echoes_correlation_id(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["X-Correlation-ID"] == "abc-123"
