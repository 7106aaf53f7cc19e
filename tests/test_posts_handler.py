"""
Unit tests for the post routes against a mocked repository
"""

import pytest
from datetime import datetime
from fastapi.testclient import TestClient

from app.main import create_app
from app.modules.posts import messages
from app.modules.posts.schemas.post import Post, PostWrite


FIELDS_REQUIRED = {"message": messages.POST_FIELDS_REQUIRED}


def _post(post_id="1", title="A", contents="B"):
    now = datetime(2026, 1, 1, 12, 0, 0)
    return Post(id=post_id, title=title, contents=contents, created_at=now, updated_at=now)


class TestValidation:
    """Invalid bodies never reach the repository"""

    @pytest.mark.parametrize("body", [
        {},
        {"title": "A"},
        {"contents": "B"},
        {"title": "", "contents": "B"},
        {"title": "A", "contents": ""},
        {"title": "   ", "contents": "B"},
        {"title": None, "contents": "B"},
        {"title": 0, "contents": "B"},
        {"title": 42, "contents": "B"},
        {"title": True, "contents": "B"},
        {"title": ["A"], "contents": "B"},
    ])
    def test_create_rejects_body(self, mock_client, mock_repository, body):
        response = mock_client.post("/api/posts", json=body)

        assert response.status_code == 400
        assert response.json() == FIELDS_REQUIRED
        mock_repository.insert.assert_not_awaited()

    @pytest.mark.parametrize("body", [
        {"title": ""},
        {"title": "A"},
        {"contents": "B", "title": "  "},
    ])
    def test_update_rejects_body_before_lookup(self, mock_client, mock_repository, body):
        response = mock_client.put("/api/posts/1", json=body)

        assert response.status_code == 400
        assert response.json() == FIELDS_REQUIRED
        mock_repository.update.assert_not_awaited()
        mock_repository.find_by_id.assert_not_awaited()

    def test_malformed_json_is_rejected(self, mock_client, mock_repository):
        response = mock_client.post(
            "/api/posts",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == FIELDS_REQUIRED
        mock_repository.insert.assert_not_awaited()

    def test_non_object_body_is_rejected(self, mock_client, mock_repository):
        response = mock_client.post("/api/posts", json=["A", "B"])

        assert response.status_code == 400
        assert response.json() == FIELDS_REQUIRED

    def test_deeply_nested_body_is_rejected(self, mock_client, mock_repository):
        response = mock_client.post(
            "/api/posts",
            content="[" * 100000 + "]" * 100000,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.headers["content-type"] == "application/json"
        assert response.json() == FIELDS_REQUIRED
        mock_repository.insert.assert_not_awaited()

    def test_lone_surrogate_is_rejected(self, mock_client, mock_repository):
        response = mock_client.post(
            "/api/posts",
            content='{"title": "\\ud800", "contents": "B"}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == FIELDS_REQUIRED
        mock_repository.insert.assert_not_awaited()

    def test_missing_body_is_rejected(self, mock_client, mock_repository):
        response = mock_client.put("/api/posts/1")

        assert response.status_code == 400
        assert response.json() == FIELDS_REQUIRED
        mock_repository.update.assert_not_awaited()


class TestRepositoryCalls:
    """The routes pass the extracted fields and path id to the repository"""

    def test_create_passes_only_title_and_contents(self, mock_client, mock_repository):
        mock_repository.insert.return_value = _post()

        response = mock_client.post("/api/posts", json={"title": "A", "contents": "B", "extra": 1})

        assert response.status_code == 201
        mock_repository.insert.assert_awaited_once_with(PostWrite(title="A", contents="B"))

    def test_update_passes_id_and_fields(self, mock_client, mock_repository):
        mock_repository.update.return_value = _post("7", "X", "Y")

        response = mock_client.put("/api/posts/7", json={"title": "X", "contents": "Y"})

        assert response.status_code == 200
        assert response.json()["id"] == "7"
        mock_repository.update.assert_awaited_once_with("7", PostWrite(title="X", contents="Y"))

    def test_get_passes_id_untouched(self, mock_client, mock_repository):
        mock_repository.find_by_id.return_value = _post("abc-123")

        response = mock_client.get("/api/posts/abc-123")

        assert response.status_code == 200
        mock_repository.find_by_id.assert_awaited_once_with("abc-123")

    def test_absent_results_map_to_404(self, mock_client, mock_repository):
        mock_repository.find_by_id.return_value = None
        mock_repository.update.return_value = None
        mock_repository.remove.return_value = None

        responses = [
            mock_client.get("/api/posts/1"),
            mock_client.put("/api/posts/1", json={"title": "A", "contents": "B"}),
            mock_client.delete("/api/posts/1"),
        ]

        for response in responses:
            assert response.status_code == 404
            assert response.json() == {"message": messages.POST_NOT_FOUND}

    def test_delete_drops_removed_record_from_body(self, mock_client, mock_repository):
        mock_repository.remove.return_value = _post()

        response = mock_client.delete("/api/posts/1")

        assert response.status_code == 204
        assert response.content == b""


class TestStorageFailures:
    """Every repository fault becomes a 500 with a fixed message"""

    @pytest.mark.parametrize("method, path, body, message", [
        ("get", "/api/posts", None, messages.POSTS_RETRIEVE_FAILED),
        ("get", "/api/posts/1", None, messages.POST_RETRIEVE_FAILED),
        ("post", "/api/posts", {"title": "A", "contents": "B"}, messages.POST_SAVE_FAILED),
        ("put", "/api/posts/1", {"title": "A", "contents": "B"}, messages.POST_UPDATE_FAILED),
        ("delete", "/api/posts/1", None, messages.POST_REMOVE_FAILED),
        ("get", "/api/posts/1/comments", None, messages.COMMENTS_RETRIEVE_FAILED),
    ])
    def test_fault_maps_to_500(self, mock_client, failing_repository, method, path, body, message):
        kwargs = {"json": body} if body is not None else {}

        response = mock_client.request(method.upper(), path, **kwargs)

        assert response.status_code == 500
        assert response.json() == {"message": message}

    def test_fault_detail_is_not_exposed(self, mock_client, failing_repository):
        response = mock_client.get("/api/posts")

        assert "unreachable" not in response.text

    def test_unexpected_exception_is_a_fault(self, mock_client, mock_repository):
        mock_repository.find_all.side_effect = RuntimeError("boom")

        response = mock_client.get("/api/posts")

        assert response.status_code == 500
        assert response.json() == {"message": messages.POSTS_RETRIEVE_FAILED}

    def test_validation_still_wins_over_faults(self, mock_client, failing_repository):
        response = mock_client.post("/api/posts", json={"title": "A"})

        assert response.status_code == 400
        failing_repository.insert.assert_not_awaited()


class TestRequestValidationHandler:
    """Typed parameters that fail FastAPI validation get the message body"""

    def test_typed_parameter_error_maps_to_400(self, mock_repository):
        app = create_app(mock_repository)

        @app.get("/api/typed/{count}")
        async def read_count(count: int):
            return {"count": count}

        client = TestClient(app)

        assert client.get("/api/typed/3").json() == {"count": 3}
        response = client.get("/api/typed/three")

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid request"}
