"""
Tabular access to todos.

FIELDS is a static registration table of (column name, accessor) pairs in
Todo field order. Rows and columns are built from it rather than by
reflecting over the dataclass, so the column set is fixed and explicit.
"""

from typing import Any, Callable, Dict, Iterable, List, Tuple, Union

from todofiles.models.todo import Todo

FIELDS: Tuple[Tuple[str, Callable[[Todo], Any]], ...] = (
    ("completed", lambda t: t.completed),
    ("priority", lambda t: t.priority),
    ("completion_date", lambda t: t.completion_date),
    ("creation_date", lambda t: t.creation_date),
    ("description", lambda t: t.description),
    ("contexts", lambda t: t.contexts),
    ("projects", lambda t: t.projects),
    ("metadata", lambda t: t.metadata),
    ("subtasks", lambda t: t.subtasks),
)

_ACCESSORS: Dict[str, Callable[[Todo], Any]] = dict(FIELDS)


def column_names() -> List[str]:
    return [name for name, _ in FIELDS]


def get_column(todo: Todo, key: Union[str, int]) -> Any:
    """
    Read one column of a todo by name or 0-based position.

    Raises:
        KeyError: unknown column name
        IndexError: position out of range
    """
    if isinstance(key, int):
        return FIELDS[key][1](todo)
    if key not in _ACCESSORS:
        raise KeyError(f"Unknown column {key!r}; expected one of {column_names()}")
    return _ACCESSORS[key](todo)


def row(todo: Todo) -> Dict[str, Any]:
    return {name: accessor(todo) for name, accessor in FIELDS}


def rows(todos: Iterable[Todo]) -> List[Dict[str, Any]]:
    return [row(todo) for todo in todos]


def column_table(todos: Iterable[Todo]) -> Dict[str, List[Any]]:
    """Column-oriented view: one list per field, aligned by todo position."""
    items = list(todos)
    return {name: [accessor(todo) for todo in items] for name, accessor in FIELDS}
