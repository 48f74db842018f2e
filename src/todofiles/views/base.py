"""Base class shared by all HTML views."""

from typing import Iterable, List

from todofiles.models.todo import Todo
from todofiles.views.assets import STYLE


class TodoView:
    """
    A read-only rendering of a sequence of todos.

    Accepts any iterable of Todo, including TodoCollection and
    MarkdownDocument (which iterates depth-first, subtasks after their
    parent). The input is copied into a list and never modified.
    """

    def __init__(self, todos: Iterable[Todo]) -> None:
        self.todos: List[Todo] = list(todos)

    def render_body(self) -> str:
        raise NotImplementedError

    def render(self) -> str:
        """Full HTML fragment: shared stylesheet plus the view body."""
        return f'{STYLE}\n<div class="todo-container">\n{self.render_body()}\n</div>'

    def _repr_html_(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.todos)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self.todos)} tasks)"
