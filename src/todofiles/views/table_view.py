"""
Table view with client-side sortable columns.

Each cell carries a precomputed ``data-sort-value`` so the embedded script
only has to compare strings. Clicking the same header again flips the
direction; clicking another header sorts it ascending.
"""

from typing import Callable, Iterable, List, Optional, Tuple

from todofiles.models.todo import Todo
from todofiles.utils.dates import format_date
from todofiles.utils.ids import check_element_id, generate_element_id
from todofiles.views.assets import sort_script
from todofiles.views.base import TodoView
from todofiles.views.html import escape_html, render_pills

# Sort key for todos without a priority; sorts after every letter.
NO_PRIORITY_SORT_KEY = "ZZ"


def _tags_sort_key(todo: Todo) -> str:
    return ",".join(todo.contexts) + ";" + ",".join(todo.projects)


# (header, sort key, cell html)
COLUMNS: List[Tuple[str, Callable[[Todo], str], Callable[[Todo], str]]] = [
    (
        "Done",
        lambda t: "1" if t.completed else "0",
        lambda t: "&#10003;" if t.completed else "",
    ),
    (
        "Priority",
        lambda t: t.priority or NO_PRIORITY_SORT_KEY,
        lambda t: escape_html(t.priority or ""),
    ),
    (
        "Description",
        lambda t: t.description,
        lambda t: escape_html(t.description),
    ),
    (
        "Tags",
        _tags_sort_key,
        render_pills,
    ),
    (
        "Created",
        lambda t: format_date(t.creation_date),
        lambda t: format_date(t.creation_date),
    ),
    (
        "Completed",
        lambda t: format_date(t.completion_date),
        lambda t: format_date(t.completion_date),
    ),
]


def sort_values(todo: Todo) -> List[str]:
    """The per-column sort keys for one row."""
    return [sort_key(todo) for _, sort_key, _ in COLUMNS]


class TableView(TodoView):
    def __init__(self, todos: Iterable[Todo], table_id: Optional[str] = None) -> None:
        super().__init__(todos)
        self.table_id = check_element_id(table_id) if table_id is not None else generate_element_id()

    def render_body(self) -> str:
        tid = self.table_id
        parts = [f'<table class="todo-table" id="todo-table-{tid}">', "<thead><tr>"]
        for index, (header, _, _) in enumerate(COLUMNS):
            parts.append(
                f'<th onclick="todoSort_{tid}({index})">{header} '
                f'<span class="todo-sort-arrow"></span></th>'
            )
        parts.append("</tr></thead>")
        parts.append("<tbody>")
        for todo in self.todos:
            row_class = ' class="todo-done"' if todo.completed else ""
            parts.append(f"<tr{row_class}>")
            for _, sort_key, cell in COLUMNS:
                parts.append(
                    f'<td data-sort-value="{escape_html(sort_key(todo))}">{cell(todo)}</td>'
                )
            parts.append("</tr>")
        parts.append("</tbody></table>")
        parts.append(sort_script(tid))
        return "\n".join(parts)
