"""
Canonical Todo.txt formatting.

This module is the single source of truth for how a Todo is rendered back
to a line of text. Field order is fixed:

    [x [completion_date]] [(priority)] [creation_date] description
    [@context]* [+project]* [key:value]*

Contexts and projects keep their stored order; metadata is always emitted
sorted by key so output is deterministic regardless of input order.
"""

from typing import Iterable, List

from todofiles.models.todo import Todo


def format_todo(todo: Todo) -> str:
    """
    Render a single todo as one Todo.txt line.

    The completion date is only written for completed todos.
    """
    parts: List[str] = []

    if todo.completed:
        parts.append("x")
        if todo.completion_date is not None:
            parts.append(todo.completion_date.isoformat())
    if todo.priority:
        parts.append(f"({todo.priority})")
    if todo.creation_date is not None:
        parts.append(todo.creation_date.isoformat())
    if todo.description:
        parts.append(todo.description)

    parts.extend(f"@{context}" for context in todo.contexts)
    parts.extend(f"+{project}" for project in todo.projects)
    parts.extend(f"{key}:{value}" for key, value in sorted(todo.metadata.items()))

    return " ".join(parts)


def format_todos(todos: Iterable[Todo]) -> str:
    """Render todos one per line, with a trailing newline."""
    return "\n".join(format_todo(todo) for todo in todos) + "\n"
