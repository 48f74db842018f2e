"""
Tests for cache/file_cache.py.

Uses real files on disk; mtimes are set explicitly with os.utime so change
detection does not depend on filesystem timestamp resolution.
"""

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from todofiles.cache import FileCache
from todofiles.models.collection import MarkdownDocument, TodoCollection


def _write(path: Path, text: str, mtime: float) -> None:
    path.write_text(text, encoding="utf-8")
    os.utime(path, (mtime, mtime))


@pytest.fixture
def todo_file(tmp_path):
    path = tmp_path / "todo.txt"
    _write(path, "(A) First\nSecond\n", 1_000_000.0)
    return path


class TestResolve:
    def test_explicit_path(self, tmp_path, todo_file):
        cache = FileCache()
        assert cache.resolve(str(todo_file)) == todo_file.resolve()

    def test_default_file(self, todo_file):
        cache = FileCache(default_file=todo_file)
        assert cache.resolve() == todo_file.resolve()

    def test_no_default(self):
        with pytest.raises(ValueError):
            FileCache().resolve()


class TestGet:
    def test_loads_by_suffix(self, tmp_path, todo_file):
        md = tmp_path / "todos.md"
        _write(md, "# H\n- Task\n", 1_000_000.0)
        cache = FileCache()
        assert isinstance(cache.get(todo_file), TodoCollection)
        assert isinstance(cache.get(md), MarkdownDocument)

    def test_cached_when_unchanged(self, todo_file):
        cache = FileCache(default_file=todo_file)
        first = cache.get()
        assert cache.get() is first

    def test_reloads_when_mtime_changes(self, todo_file):
        cache = FileCache(default_file=todo_file)
        first = cache.get()
        _write(todo_file, "Only one\n", 2_000_000.0)
        second = cache.get()
        assert second is not first
        assert len(second) == 1
        assert second[0].description == "Only one"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            FileCache().get(tmp_path / "missing.txt")


class TestInvalidate:
    def test_invalidate(self, todo_file):
        cache = FileCache(default_file=todo_file)
        first = cache.get()
        cache.invalidate()
        assert cache.status()["file_count"] == 0
        assert cache.get() is not first

    def test_invalidate_unknown_is_noop(self, tmp_path):
        cache = FileCache()
        cache.invalidate(tmp_path / "never-loaded.txt")
        assert cache.status()["file_count"] == 0

    def test_clear(self, todo_file):
        cache = FileCache()
        cache.get(todo_file)
        cache.clear()
        assert cache.status()["files"] == []


class TestStatus:
    def test_status(self, todo_file):
        cache = FileCache(default_file=todo_file)
        cache.get()
        status = cache.status()
        assert status["default_file"] == str(todo_file)
        assert status["file_count"] == 1
        assert status["task_count"] == 2
        entry = status["files"][0]
        assert entry["format"] == "todo.txt"
        assert entry["tasks"] == 2
        assert entry["mtime"] == 1_000_000.0
