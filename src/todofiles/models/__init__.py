from .todo import SECTION_KEY, Todo, TodoSection
from .collection import MarkdownDocument, TodoCollection, TodoDocument, load_file

__all__ = [
    "SECTION_KEY",
    "Todo",
    "TodoSection",
    "TodoCollection",
    "MarkdownDocument",
    "TodoDocument",
    "load_file",
]
