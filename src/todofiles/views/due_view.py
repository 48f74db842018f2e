"""
Due-date timeline.

Only pending todos with a valid ``due:`` date are shown, soonest first, each
as a marker on a shared axis that runs from the most overdue day (or today)
to the furthest due day (or tomorrow). The reference day is always passed
in by the caller.
"""

from datetime import date
from typing import Iterable, List, NamedTuple

from todofiles.models.todo import Todo
from todofiles.utils.dates import days_between
from todofiles.views.base import TodoView
from todofiles.views.html import escape_html, render_empty

EMPTY_MESSAGE = "No pending tasks with a due date."


class DueItem(NamedTuple):
    todo: Todo
    due: date
    days_remaining: int


def urgency(days_remaining: int) -> str:
    """Urgency bucket: overdue, urgent, soon, ok or plenty."""
    if days_remaining < 0:
        return "overdue"
    if days_remaining <= 3:
        return "urgent"
    if days_remaining <= 7:
        return "soon"
    if days_remaining <= 14:
        return "ok"
    return "plenty"


def status_label(days_remaining: int) -> str:
    if days_remaining < 0:
        return f"{-days_remaining}d overdue"
    if days_remaining == 0:
        return "due today"
    if days_remaining == 1:
        return "1 day left"
    return f"{days_remaining} days left"


def due_items(todos: Iterable[Todo], today: date) -> List[DueItem]:
    """Pending todos with a valid due date, sorted by days remaining."""
    items = []
    for todo in todos:
        if todo.completed:
            continue
        due = todo.due
        if due is None:
            continue
        items.append(DueItem(todo, due, days_between(today, due)))
    items.sort(key=lambda item: item.days_remaining)
    return items


def timeline_position(days: int, low: int, high: int) -> float:
    """Percentage position of ``days`` on an axis from ``low`` to ``high``."""
    return 100.0 * (days - low) / (high - low)


class DueView(TodoView):
    def __init__(self, todos: Iterable[Todo], today: date) -> None:
        super().__init__(todos)
        self.today = today

    def render_body(self) -> str:
        items = due_items(self.todos, self.today)
        if not items:
            return render_empty(EMPTY_MESSAGE)

        low = min(items[0].days_remaining, 0)
        high = max(items[-1].days_remaining, 1)
        today_pos = timeline_position(0, low, high)

        parts = ['<div class="todo-due">']
        parts.append(
            f'<div class="todo-due-axis"><span>{low:+d}d</span>'
            f"<span>today {self.today.isoformat()}</span><span>{high:+d}d</span></div>"
        )
        for item in items:
            bucket = urgency(item.days_remaining)
            pos = timeline_position(item.days_remaining, low, high)
            parts.append(f'<div class="todo-due-row todo-due-row-{bucket}">')
            parts.append(f'<div class="todo-due-label">{escape_html(item.todo.description)}</div>')
            parts.append(
                '<div class="todo-due-track">'
                f'<div class="todo-due-today" style="left: {today_pos:.2f}%;"></div>'
                f'<div class="todo-due-marker todo-due-{bucket}" style="left: {pos:.2f}%;" '
                f'title="{item.due.isoformat()}"></div>'
                "</div>"
            )
            parts.append(f'<div class="todo-due-status">{status_label(item.days_remaining)}</div>')
            parts.append("</div>")
        parts.append("</div>")
        return "\n".join(parts)
