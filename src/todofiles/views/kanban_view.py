"""Kanban view: todo cards in one column per group."""

from typing import Iterable

from todofiles.models.collection import MarkdownDocument
from todofiles.models.todo import Todo
from todofiles.views.base import TodoView
from todofiles.views.grouping import group_todos, validate_group_by
from todofiles.views.html import escape_html, render_card


class KanbanView(TodoView):
    """
    Cards grouped into columns by ``group_by``.

    ``section`` grouping needs the originating heading on each todo; a
    MarkdownDocument is flattened with section injection for it. Any other
    input falls back to a single "(no section)" column.
    """

    def __init__(self, todos: Iterable[Todo], group_by: str = "priority") -> None:
        validate_group_by(group_by)
        if group_by == "section" and isinstance(todos, MarkdownDocument):
            todos = todos.flatten(with_section=True)
        super().__init__(todos)
        self.group_by = group_by

    def render_body(self) -> str:
        parts = ['<div class="todo-kanban">']
        for key, todos in group_todos(self.todos, self.group_by):
            parts.append('<div class="todo-kanban-col">')
            parts.append(
                f'<div class="todo-kanban-header">{escape_html(key)} '
                f'<span class="todo-kanban-count">({len(todos)})</span></div>'
            )
            parts.extend(render_card(todo) for todo in todos)
            parts.append("</div>")
        parts.append("</div>")
        return "\n".join(parts)

    def __repr__(self) -> str:
        return f"KanbanView({len(self.todos)} tasks, group_by={self.group_by})"
