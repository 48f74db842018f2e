from .tag_extractor import extract_tags
from .todo_parser import parse_todo, parse_todos
from .markdown_parser import parse_markdown, format_markdown

__all__ = [
    "extract_tags",
    "parse_todo",
    "parse_todos",
    "parse_markdown",
    "format_markdown",
]
