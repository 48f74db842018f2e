"""
Grouping of todos into kanban columns.

A todo lands in exactly one group for ``priority``, ``completed`` and
``section``. For ``projects`` and ``contexts`` it lands in one group per
distinct tag, or in the single "(no ...)" group when it has none.
"""

from typing import Dict, List, Tuple

from todofiles.errors import UsageError
from todofiles.models.todo import Todo

GROUP_BY_CHOICES = ("priority", "completed", "projects", "contexts", "section")

NO_PRIORITY = "(none)"
NO_PROJECT = "(no project)"
NO_CONTEXT = "(no context)"
NO_SECTION = "(no section)"

_NONE_KEYS = frozenset({NO_PRIORITY, NO_PROJECT, NO_CONTEXT, NO_SECTION})


def validate_group_by(group_by: str) -> str:
    if group_by not in GROUP_BY_CHOICES:
        raise UsageError(
            f"Unknown group_by {group_by!r}; expected one of {', '.join(GROUP_BY_CHOICES)}"
        )
    return group_by


def group_keys(todo: Todo, group_by: str) -> List[str]:
    """The group keys a todo belongs to, in first-seen order."""
    validate_group_by(group_by)
    if group_by == "priority":
        return [todo.priority or NO_PRIORITY]
    if group_by == "completed":
        return ["Done" if todo.completed else "Pending"]
    if group_by == "projects":
        return list(dict.fromkeys(todo.projects)) or [NO_PROJECT]
    if group_by == "contexts":
        return list(dict.fromkeys(todo.contexts)) or [NO_CONTEXT]
    return [todo.section or NO_SECTION]


def sort_group_key(key: str) -> Tuple[bool, str]:
    """Real keys alphabetically, then the "(none)"-style sentinels."""
    return key in _NONE_KEYS, key


def group_todos(todos: List[Todo], group_by: str) -> List[Tuple[str, List[Todo]]]:
    """
    Group todos by a dimension.

    Returns (key, todos) pairs sorted with all sentinel keys after all real
    keys. Todos keep their input order inside each group.

    Raises:
        UsageError: unknown ``group_by``
    """
    validate_group_by(group_by)
    groups: Dict[str, List[Todo]] = {}
    for todo in todos:
        for key in group_keys(todo, group_by):
            groups.setdefault(key, []).append(todo)
    return sorted(groups.items(), key=lambda item: sort_group_key(item[0]))
