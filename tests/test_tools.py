"""
Tests for tools/todo_tools.py.

Uses a real FileCache backed by temporary files on disk.
Exercises the MCP tool functions directly (bypasses transport).
"""

import json
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from todofiles.cache import FileCache
from todofiles.errors import UsageError
from todofiles.tools import register_todo_tools
from todofiles.tools.todo_tools import handle_todo_render, resolve_today


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

TODO_TXT = (
    "(A) 2024-01-15 Call Mom +Family @phone due:2024-01-20\n"
    "x 2024-01-16 2024-01-10 Pay bills\n"
    "\n"
    "Buy groceries @store +Errands due:2024-01-12\n"
)

TODO_MD = (
    "# Work\n"
    "- (A) Finish report @office\n"
    "    - Gather numbers\n"
    "## Personal\n"
    "- Buy groceries @store\n"
)


class _FakeMCP:
    """Minimal fake to capture tool registrations."""

    def __init__(self):
        self._tools = {}

    def tool(self, *args, **kwargs):
        """Decorator that records functions by name."""
        def decorator(fn):
            self._tools[fn.__name__] = fn
            return fn
        return decorator

    def get(self, name: str):
        return self._tools[name]


@pytest.fixture
def setup(tmp_path):
    todo_file = tmp_path / "todo.txt"
    todo_file.write_text(TODO_TXT, encoding="utf-8")
    md_file = tmp_path / "todos.md"
    md_file.write_text(TODO_MD, encoding="utf-8")

    cache = FileCache(default_file=todo_file)
    mcp = _FakeMCP()
    register_todo_tools(mcp, cache)

    return mcp, cache, todo_file, md_file


# ---------------------------------------------------------------------------
# todo_list
# ---------------------------------------------------------------------------

class TestTodoList:
    def test_default_file(self, setup):
        mcp, cache, todo_file, md_file = setup
        data = json.loads(mcp.get("todo_list")())
        assert data["count"] == 3
        assert data["file_path"] == str(todo_file.resolve())
        first = data["todos"][0]
        assert first["priority"] == "A"
        assert first["description"] == "Call Mom"
        assert first["creation_date"] == "2024-01-15"
        assert first["metadata"] == {"due": "2024-01-20"}
        assert first["line"] == "(A) 2024-01-15 Call Mom @phone +Family due:2024-01-20"
        assert data["todos"][1]["completed"] is True

    def test_markdown_sections(self, setup):
        mcp, cache, todo_file, md_file = setup
        data = json.loads(mcp.get("todo_list")(file_path=str(md_file)))
        assert data["count"] == 3
        assert [s["heading"] for s in data["sections"]] == ["Work", "Personal"]
        report = data["sections"][0]["todos"][0]
        assert report["subtasks"][0]["description"] == "Gather numbers"

    def test_missing_file(self, setup, tmp_path):
        mcp, cache, todo_file, md_file = setup
        data = json.loads(mcp.get("todo_list")(file_path=str(tmp_path / "missing.txt")))
        assert "error" in data

    def test_directory_path(self, setup, tmp_path):
        mcp, cache, todo_file, md_file = setup
        data = json.loads(mcp.get("todo_list")(file_path=str(tmp_path)))
        assert "cannot be accessed" in data["error"]

    def test_no_default_file(self):
        mcp = _FakeMCP()
        register_todo_tools(mcp, FileCache())
        data = json.loads(mcp.get("todo_list")())
        assert "error" in data


# ---------------------------------------------------------------------------
# todo_render
# ---------------------------------------------------------------------------

class TestTodoRender:
    @pytest.mark.parametrize("view", ["list", "table", "kanban", "gantt"])
    def test_views(self, setup, view):
        mcp, cache, todo_file, md_file = setup
        data = json.loads(mcp.get("todo_render")(view=view))
        assert data["view"] == view
        assert 'class="todo-container"' in data["html"]

    def test_due_with_explicit_today(self, setup):
        mcp, cache, todo_file, md_file = setup
        data = json.loads(mcp.get("todo_render")(view="due", today="2024-01-14"))
        html = data["html"]
        assert "6 days left" in html
        assert "2d overdue" in html
        assert "Pay bills" not in html

    def test_kanban_section_grouping(self, setup):
        mcp, cache, todo_file, md_file = setup
        data = json.loads(
            mcp.get("todo_render")(file_path=str(md_file), view="kanban", group_by="section")
        )
        assert ">Work <" in data["html"]
        assert ">Personal <" in data["html"]

    def test_unknown_view(self, setup):
        mcp, cache, todo_file, md_file = setup
        data = json.loads(mcp.get("todo_render")(view="pie"))
        assert "Unknown view" in data["error"]

    def test_bad_today(self, setup):
        mcp, cache, todo_file, md_file = setup
        data = json.loads(mcp.get("todo_render")(view="due", today="whenever"))
        assert "error" in data

    def test_handler_reference_day(self, setup):
        mcp, cache, todo_file, md_file = setup
        result = handle_todo_render(
            cache, view="due", today="tomorrow", reference=date(2024, 1, 11)
        )
        assert "due today" in result["html"]


# ---------------------------------------------------------------------------
# todo_normalize
# ---------------------------------------------------------------------------

class TestTodoNormalize:
    def test_rewrites_canonical(self, setup):
        mcp, cache, todo_file, md_file = setup
        data = json.loads(mcp.get("todo_normalize")())
        assert data["count"] == 3
        assert todo_file.read_text(encoding="utf-8") == (
            "(A) 2024-01-15 Call Mom @phone +Family due:2024-01-20\n"
            "x 2024-01-16 2024-01-10 Pay bills\n"
            "Buy groceries @store +Errands due:2024-01-12\n"
        )

    def test_invalidates_cache(self, setup):
        mcp, cache, todo_file, md_file = setup
        mcp.get("todo_list")()
        assert cache.status()["file_count"] == 1
        mcp.get("todo_normalize")()
        assert cache.status()["file_count"] == 0

    def test_missing_file(self, setup, tmp_path):
        mcp, cache, todo_file, md_file = setup
        data = json.loads(mcp.get("todo_normalize")(file_path=str(tmp_path / "nope.txt")))
        assert "error" in data


# ---------------------------------------------------------------------------
# cache_status
# ---------------------------------------------------------------------------

class TestCacheStatus:
    def test_status(self, setup):
        mcp, cache, todo_file, md_file = setup
        mcp.get("todo_list")()
        mcp.get("todo_list")(file_path=str(md_file))
        data = json.loads(mcp.get("cache_status")())
        assert data["file_count"] == 2
        assert data["task_count"] == 6
        assert {f["format"] for f in data["files"]} == {"todo.txt", "markdown"}


# ---------------------------------------------------------------------------
# resolve_today
# ---------------------------------------------------------------------------

class TestResolveToday:
    def test_defaults_to_reference(self):
        assert resolve_today(None, date(2024, 3, 1)) == date(2024, 3, 1)

    def test_natural_language(self):
        assert resolve_today("tomorrow", date(2024, 3, 1)) == date(2024, 3, 2)

    def test_iso(self):
        assert resolve_today("2024-05-05", date(2024, 3, 1)) == date(2024, 5, 5)

    def test_unparseable(self):
        with pytest.raises(UsageError):
            resolve_today("someday", date(2024, 3, 1))
