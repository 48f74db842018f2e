"""
todofiles: Todo.txt and markdown todo lists.

Main API:
    parse_todo(line) / parse_todos(text)       → Todo / List[Todo]
    format_todo(todo) / format_todos(todos)    → str
    parse_markdown(text) / format_markdown(sections)
    load_file(path)                            → TodoCollection | MarkdownDocument
    html_view(todos, view="kanban", group_by="projects")
"""

from todofiles.models import (
    SECTION_KEY,
    MarkdownDocument,
    Todo,
    TodoCollection,
    TodoSection,
    load_file,
)
from todofiles.parsers import extract_tags, format_markdown, parse_markdown, parse_todo, parse_todos
from todofiles.utils.formatting import format_todo, format_todos
from todofiles.errors import UsageError
from todofiles.views import (
    DueView,
    GanttView,
    KanbanView,
    ListView,
    TableView,
    html_view,
)

__all__ = [
    "SECTION_KEY",
    "Todo",
    "TodoSection",
    "TodoCollection",
    "MarkdownDocument",
    "load_file",
    "extract_tags",
    "parse_todo",
    "parse_todos",
    "format_todo",
    "format_todos",
    "parse_markdown",
    "format_markdown",
    "UsageError",
    "ListView",
    "TableView",
    "KanbanView",
    "GanttView",
    "DueView",
    "html_view",
]
