"""
Todo tool handlers.

Core logic lives in handle_* functions (return dicts).
MCP wrappers in register_todo_tools() serialize to JSON strings.
The REST API calls the same handlers.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from todofiles.errors import UsageError
from todofiles.models.collection import MarkdownDocument
from todofiles.utils.dates import format_date, parse_date
from todofiles.utils.formatting import format_todo
from todofiles.views import html_view

log = logging.getLogger(__name__)


def _todo_to_dict(todo, include_subtasks: bool = True) -> dict:
    """Serialize a Todo to a JSON-serializable dict."""
    d = {
        "line": format_todo(todo),
        "completed": todo.completed,
        "priority": todo.priority,
        "completion_date": format_date(todo.completion_date) or None,
        "creation_date": format_date(todo.creation_date) or None,
        "description": todo.description,
        "contexts": list(todo.contexts),
        "projects": list(todo.projects),
        "metadata": dict(todo.metadata),
    }
    if include_subtasks and todo.subtasks:
        d["subtasks"] = [_todo_to_dict(s, include_subtasks=False) for s in todo.subtasks]
    return d


def _not_found(file_path: Optional[str]) -> dict:
    return {"error": f"File '{file_path}' not found"}


def _unreadable(file_path: Optional[str], error: OSError) -> dict:
    log.warning("Cannot access %s: %s", file_path, error)
    return {"error": f"File '{file_path}' cannot be accessed: {error.strerror or error}"}


def resolve_today(today: Optional[str], reference: Optional[date] = None) -> date:
    """
    Turn a user-supplied "today" into a date.

    ``reference`` is the real current day, read by the caller at the edge;
    it is what natural forms like "tomorrow" are relative to.

    Raises:
        UsageError: unparseable date
    """
    reference = reference or date.today()
    if not today:
        return reference
    parsed = parse_date(today, reference)
    if parsed is None:
        raise UsageError(f"Unrecognised date {today!r}")
    return parsed


# ---------------------------------------------------------------------------
# Handler functions (return dicts, shared by MCP tools and REST API)
# ---------------------------------------------------------------------------


def handle_todo_list(cache, *, file_path: Optional[str] = None) -> dict:
    try:
        document = cache.get(file_path)
    except FileNotFoundError:
        return _not_found(file_path)
    except OSError as e:
        return _unreadable(file_path, e)

    result = {"file_path": str(cache.resolve(file_path)), "count": len(document)}
    if isinstance(document, MarkdownDocument):
        result["sections"] = [
            {
                "heading": section.heading,
                "level": section.level,
                "todos": [_todo_to_dict(t) for t in section.todos],
            }
            for section in document.sections
        ]
    else:
        result["todos"] = [_todo_to_dict(t) for t in document]
    return result


def handle_todo_render(
    cache,
    *,
    file_path: Optional[str] = None,
    view: str = "list",
    group_by: str = "priority",
    today: Optional[str] = None,
    reference: Optional[date] = None,
) -> dict:
    """
    Render a file through one of the HTML views.

    Raises:
        UsageError: unknown view/group_by or unparseable ``today``
    """
    try:
        document = cache.get(file_path)
    except FileNotFoundError:
        return _not_found(file_path)
    except OSError as e:
        return _unreadable(file_path, e)

    due_today = resolve_today(today, reference) if view == "due" else None
    rendered = html_view(document, view=view, group_by=group_by, today=due_today)
    log.debug("Rendered %r for %s", rendered, file_path or cache.default_file)
    return {
        "file_path": str(cache.resolve(file_path)),
        "view": view,
        "html": rendered.render(),
    }


def handle_todo_normalize(cache, *, file_path: Optional[str] = None) -> dict:
    """Rewrite a file in canonical form and drop it from the cache."""
    try:
        document = cache.get(file_path)
    except FileNotFoundError:
        return _not_found(file_path)
    except OSError as e:
        return _unreadable(file_path, e)

    try:
        document.write_back()
    except OSError as e:
        return _unreadable(file_path, e)
    cache.invalidate(file_path)
    log.info("Normalized %s (%d tasks)", document.source_id, len(document))
    return {"file_path": str(Path(document.source_id)), "count": len(document)}


def handle_cache_status(cache) -> dict:
    return cache.status()


# ---------------------------------------------------------------------------
# MCP registration
# ---------------------------------------------------------------------------


def register_todo_tools(mcp: FastMCP, cache) -> None:
    """Register all todo tools on the MCP server."""

    @mcp.tool()
    def todo_list(file_path: Optional[str] = None) -> str:
        """
        List the todos in a Todo.txt or markdown todo file.

        Args:
            file_path: Path to the file (defaults to the configured TODO_FILE)

        Returns:
            JSON object with the parsed todos (grouped by section for markdown files)
        """
        try:
            return json.dumps(handle_todo_list(cache, file_path=file_path), indent=2)
        except (OSError, ValueError) as e:
            return json.dumps({"error": str(e)})

    @mcp.tool()
    def todo_render(
        file_path: Optional[str] = None,
        view: str = "list",
        group_by: str = "priority",
        today: Optional[str] = None,
    ) -> str:
        """
        Render a todo file as HTML.

        Args:
            file_path: Path to the file (defaults to the configured TODO_FILE)
            view: "list", "table", "kanban", "gantt" or "due"
            group_by: Kanban grouping: "priority", "completed", "projects", "contexts" or "section"
            today: Reference day for the due view (ISO date or "today", "tomorrow", "Friday", ...)

        Returns:
            JSON object with an "html" field, or error message
        """
        try:
            return json.dumps(
                handle_todo_render(
                    cache, file_path=file_path, view=view, group_by=group_by, today=today
                ),
                indent=2,
            )
        except (OSError, ValueError) as e:
            log.warning("todo_render failed: %s", e)
            return json.dumps({"error": str(e)})

    @mcp.tool()
    def todo_normalize(file_path: Optional[str] = None) -> str:
        """
        Rewrite a todo file in canonical order.

        Each line becomes: completion mark and date, priority, creation date,
        description, @contexts, +projects, then key:value pairs sorted by key.

        Args:
            file_path: Path to the file (defaults to the configured TODO_FILE)
        """
        try:
            return json.dumps(handle_todo_normalize(cache, file_path=file_path), indent=2)
        except (OSError, ValueError) as e:
            return json.dumps({"error": str(e)})

    @mcp.tool()
    def cache_status() -> str:
        """
        Show parsed-file cache statistics.

        Returns:
            JSON with cached files and task counts
        """
        return json.dumps(handle_cache_status(cache), indent=2)
