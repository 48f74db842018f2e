"""List view: every todo as a card."""

from todofiles.views.base import TodoView
from todofiles.views.html import render_card


class ListView(TodoView):
    def render_body(self) -> str:
        parts = ['<div class="todo-list">']
        parts.extend(render_card(todo) for todo in self.todos)
        parts.append("</div>")
        return "\n".join(parts)
