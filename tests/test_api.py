"""
Tests for the REST API routes.

Uses FastAPI TestClient against a real FileCache with temporary todo files.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest
from fastapi.testclient import TestClient

from todofiles.api.app import create_app
from todofiles.cache import FileCache


TODO_TXT = (
    "(A) 2024-01-15 Call Mom +Family @phone due:2024-01-20\n"
    "x 2024-01-16 2024-01-10 Pay bills\n"
    "Buy <milk> & eggs @store\n"
)


@pytest.fixture
def todo_file(tmp_path):
    path = tmp_path / "todo.txt"
    path.write_text(TODO_TXT, encoding="utf-8")
    return path


@pytest.fixture
def client(todo_file):
    cache = FileCache(default_file=todo_file)
    return TestClient(create_app(cache))


@pytest.fixture
def client_no_default():
    return TestClient(create_app(FileCache()))


# ---------------------------------------------------------------------------
# GET /api/todos
# ---------------------------------------------------------------------------

class TestListTodos:
    def test_default_file(self, client):
        resp = client.get("/api/todos")
        assert resp.status_code == 200
        data = resp.json()
        assert data["count"] == 3
        assert data["todos"][0]["projects"] == ["Family"]

    def test_explicit_file(self, client, tmp_path):
        other = tmp_path / "other.md"
        other.write_text("# Heading\n- Only task\n", encoding="utf-8")
        resp = client.get("/api/todos", params={"file_path": str(other)})
        assert resp.status_code == 200
        assert resp.json()["sections"][0]["heading"] == "Heading"

    def test_missing_file(self, client, tmp_path):
        resp = client.get("/api/todos", params={"file_path": str(tmp_path / "nope.txt")})
        assert resp.status_code == 404

    def test_directory_path(self, client, tmp_path):
        resp = client.get("/api/todos", params={"file_path": str(tmp_path)})
        assert resp.status_code == 404
        assert "cannot be accessed" in resp.json()["detail"]

    def test_no_file_configured(self, client_no_default):
        resp = client_no_default.get("/api/todos")
        assert resp.status_code == 400


# ---------------------------------------------------------------------------
# GET /api/views/{view}
# ---------------------------------------------------------------------------

class TestRenderView:
    def test_list_html(self, client):
        resp = client.get("/api/views/list")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "Buy &lt;milk&gt; &amp; eggs" in resp.text

    def test_kanban_group_by(self, client):
        resp = client.get("/api/views/kanban", params={"group_by": "contexts"})
        assert resp.status_code == 200
        assert ">phone <" in resp.text
        assert ">store <" in resp.text
        assert ">(no context) <" in resp.text

    def test_due_with_today(self, client):
        resp = client.get("/api/views/due", params={"today": "2024-01-19"})
        assert resp.status_code == 200
        assert "1 day left" in resp.text

    def test_unknown_view(self, client):
        resp = client.get("/api/views/pie")
        assert resp.status_code == 400

    def test_bad_group_by(self, client):
        resp = client.get("/api/views/kanban", params={"group_by": "colour"})
        assert resp.status_code == 400

    def test_missing_file(self, client, tmp_path):
        resp = client.get("/api/views/list", params={"file_path": str(tmp_path / "nope.txt")})
        assert resp.status_code == 404


# ---------------------------------------------------------------------------
# POST /api/todos/normalize
# ---------------------------------------------------------------------------

class TestNormalize:
    def test_directory_path(self, client, tmp_path):
        resp = client.post("/api/todos/normalize", json={"file_path": str(tmp_path)})
        assert resp.status_code == 404

    def test_normalize(self, client, todo_file):
        resp = client.post("/api/todos/normalize", json={})
        assert resp.status_code == 200
        assert resp.json()["count"] == 3
        assert todo_file.read_text(encoding="utf-8").splitlines()[0] == (
            "(A) 2024-01-15 Call Mom @phone +Family due:2024-01-20"
        )

    def test_missing_file(self, client, tmp_path):
        resp = client.post("/api/todos/normalize", json={"file_path": str(tmp_path / "nope.txt")})
        assert resp.status_code == 404


# ---------------------------------------------------------------------------
# GET /api/cache/status
# ---------------------------------------------------------------------------

class TestCacheStatus:
    def test_empty(self, client_no_default):
        data = client_no_default.get("/api/cache/status").json()
        assert data == {"default_file": None, "file_count": 0, "task_count": 0, "files": []}

    def test_after_load(self, client):
        client.get("/api/todos")
        data = client.get("/api/cache/status").json()
        assert data["file_count"] == 1
        assert data["task_count"] == 3
