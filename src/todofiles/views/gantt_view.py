"""
Gantt-style timeline of todos.

A todo is plotted from its creation date to its ``due:`` date, or to its
completion date when it is done and has no usable ``due:``. Bar positions
are percentages of the span between the earliest plotted start and the
latest plotted end.
"""

from datetime import date
from typing import List, NamedTuple, Optional, Tuple

from todofiles.models.todo import Todo
from todofiles.views.base import TodoView
from todofiles.views.html import escape_html, priority_class, render_empty

EMPTY_MESSAGE = "No tasks with both a start date and a due/completion date."


class GanttBar(NamedTuple):
    todo: Todo
    start: date
    end: date
    left: float
    width: float


def plot_range(todo: Todo) -> Optional[Tuple[date, date]]:
    """(start, end) for a plottable todo, else None."""
    start = todo.creation_date
    if start is None:
        return None
    end = todo.due
    if end is None and todo.completed:
        end = todo.completion_date
    if end is None or end < start:
        return None
    return start, end


def bar_geometry(start: date, end: date, min_date: date, span_days: int) -> Tuple[float, float]:
    """
    (left %, width %) of a bar on a chart spanning ``span_days`` from ``min_date``.

    Bars are at least one day wide and never run past the right edge.
    """
    left = 100.0 * (start - min_date).days / span_days
    width = 100.0 * max((end - start).days, 1) / span_days
    if left + width > 100.0:
        width = 100.0 - left
    return left, width


def gantt_bars(todos: List[Todo]) -> List[GanttBar]:
    """Layout for every plottable todo, in input order."""
    ranges = [(todo, plot_range(todo)) for todo in todos]
    plotted = [(todo, r) for todo, r in ranges if r is not None]
    if not plotted:
        return []

    min_date = min(start for _, (start, _) in plotted)
    max_date = max(end for _, (_, end) in plotted)
    span_days = max((max_date - min_date).days, 1)

    bars = []
    for todo, (start, end) in plotted:
        left, width = bar_geometry(start, end, min_date, span_days)
        bars.append(GanttBar(todo, start, end, left, width))
    return bars


class GanttView(TodoView):
    def render_body(self) -> str:
        bars = gantt_bars(self.todos)
        if not bars:
            return render_empty(EMPTY_MESSAGE)

        min_date = min(bar.start for bar in bars)
        max_date = max(bar.end for bar in bars)

        parts = ['<div class="todo-gantt">']
        parts.append(
            f'<div class="todo-gantt-axis"><span>{min_date.isoformat()}</span>'
            f"<span>{max_date.isoformat()}</span></div>"
        )
        for bar in bars:
            classes = ["todo-gantt-bar", f"todo-gantt-bar-{priority_class(bar.todo.priority)}"]
            if bar.todo.completed:
                classes.append("todo-gantt-bar-done")
            title = f"{bar.start.isoformat()} to {bar.end.isoformat()}"
            parts.append('<div class="todo-gantt-row">')
            parts.append(f'<div class="todo-gantt-label">{escape_html(bar.todo.description)}</div>')
            parts.append(
                f'<div class="todo-gantt-track"><div class="{" ".join(classes)}" '
                f'style="left: {bar.left:.2f}%; width: {bar.width:.2f}%;" '
                f'title="{title}"></div></div>'
            )
            parts.append("</div>")
        parts.append("</div>")
        return "\n".join(parts)
