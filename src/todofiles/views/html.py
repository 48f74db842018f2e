"""
Shared HTML building blocks for the views.

Every piece of user-supplied text goes through escape_html() before it is
embedded in markup.
"""

from typing import List, Optional

from todofiles.models.todo import SECTION_KEY, Todo
from todofiles.utils.dates import format_date


def escape_html(value: object) -> str:
    """Escape HTML special characters."""
    return (
        str(value)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def priority_class(priority: Optional[str]) -> str:
    """CSS suffix for a priority: a, b, c or other."""
    if priority in ("A", "B", "C"):
        return priority.lower()
    return "other"


def render_pills(todo: Todo) -> str:
    """Context, project and metadata tags as inline pills."""
    parts: List[str] = []
    for context in todo.contexts:
        parts.append(f'<span class="todo-pill todo-pill-context">@{escape_html(context)}</span>')
    for project in todo.projects:
        parts.append(f'<span class="todo-pill todo-pill-project">+{escape_html(project)}</span>')
    for key, value in sorted(todo.metadata.items()):
        if key == SECTION_KEY:
            continue
        parts.append(
            f'<span class="todo-pill todo-pill-meta">{escape_html(key)}:{escape_html(value)}</span>'
        )
    return "".join(parts)


def render_card(todo: Todo) -> str:
    """One todo as a card: check mark, priority badge, description, tags and dates."""
    classes = ["todo-card"]
    if todo.completed:
        classes.append("todo-done")
    if todo.priority:
        classes.append(f"todo-priority-{todo.priority.lower()}")

    parts = [f'<div class="{" ".join(classes)}">']
    parts.append(f'<span class="todo-check">{"&#10003;" if todo.completed else "&#9675;"}</span>')
    if todo.priority:
        parts.append(f'<span class="todo-priority">({escape_html(todo.priority)})</span>')
    parts.append(f'<span class="todo-desc">{escape_html(todo.description)}</span>')
    parts.append(render_pills(todo))

    dates = []
    if todo.creation_date is not None:
        dates.append(f"created {format_date(todo.creation_date)}")
    if todo.completed and todo.completion_date is not None:
        dates.append(f"done {format_date(todo.completion_date)}")
    if dates:
        parts.append(f'<span class="todo-dates">{escape_html(" · ".join(dates))}</span>')

    parts.append("</div>")
    return "".join(parts)


def render_empty(message: str) -> str:
    return f'<div class="todo-empty">{escape_html(message)}</div>'
