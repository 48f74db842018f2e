"""
HTML views over todo sequences.

Main API:
    ListView(todos), TableView(todos), KanbanView(todos, group_by),
    GanttView(todos), DueView(todos, today)
    html_view(todos, view=..., group_by=..., today=...) → view object

Each view's render() returns an HTML fragment; _repr_html_() makes them
display inline in notebooks.
"""

from datetime import date
from typing import Iterable, Optional

from todofiles.errors import UsageError
from todofiles.models.todo import Todo

from .base import TodoView
from .due_view import DueView
from .gantt_view import GanttView
from .grouping import GROUP_BY_CHOICES, group_todos
from .html import escape_html
from .kanban_view import KanbanView
from .list_view import ListView
from .table_view import TableView

VIEW_CHOICES = ("list", "table", "kanban", "gantt", "due")


def html_view(
    todos: Iterable[Todo],
    view: str = "list",
    group_by: str = "priority",
    today: Optional[date] = None,
) -> TodoView:
    """
    Build the named view over ``todos``.

    ``group_by`` only applies to the kanban view and ``today`` only to the
    due view, where it is required.

    Raises:
        UsageError: unknown view or group_by, or no ``today`` for the due view
    """
    if view == "list":
        return ListView(todos)
    if view == "table":
        return TableView(todos)
    if view == "kanban":
        return KanbanView(todos, group_by=group_by)
    if view == "gantt":
        return GanttView(todos)
    if view == "due":
        if today is None:
            raise UsageError("The due view needs a reference date (today)")
        return DueView(todos, today=today)
    raise UsageError(f"Unknown view {view!r}; expected one of {', '.join(VIEW_CHOICES)}")


__all__ = [
    "TodoView",
    "ListView",
    "TableView",
    "KanbanView",
    "GanttView",
    "DueView",
    "html_view",
    "group_todos",
    "escape_html",
    "GROUP_BY_CHOICES",
    "VIEW_CHOICES",
]
