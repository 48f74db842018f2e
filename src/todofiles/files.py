"""
File boundary for todo documents.

These are the only functions that touch the filesystem. Errors from the
operating system (missing file, permission denied, ...) are not caught here;
they reach the caller unchanged.
"""

import logging
from pathlib import Path
from typing import List, Union

from todofiles.models.todo import Todo, TodoSection
from todofiles.parsers.markdown_parser import format_markdown, parse_markdown
from todofiles.parsers.todo_parser import parse_todos
from todofiles.utils.formatting import format_todos

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

MARKDOWN_SUFFIXES = frozenset({".md", ".markdown"})


def is_markdown_path(file_path: PathLike) -> bool:
    """True if the path should be read with the markdown section grammar."""
    return Path(file_path).suffix.lower() in MARKDOWN_SUFFIXES


def read_text(file_path: PathLike) -> str:
    """Read a whole file as UTF-8 text."""
    return Path(file_path).read_text(encoding="utf-8")


def write_text(file_path: PathLike, text: str) -> None:
    """Replace the contents of a file with UTF-8 text."""
    Path(file_path).write_text(text, encoding="utf-8")


def read_todos(file_path: PathLike) -> List[Todo]:
    """Read a Todo.txt file."""
    todos = parse_todos(read_text(file_path))
    log.debug("Read %d todos from %s", len(todos), file_path)
    return todos


def write_todos(file_path: PathLike, todos: List[Todo]) -> None:
    """Write todos to a file in canonical Todo.txt form."""
    write_text(file_path, format_todos(todos))
    log.debug("Wrote %d todos to %s", len(todos), file_path)


def read_markdown(file_path: PathLike) -> List[TodoSection]:
    """Read a markdown todo file into sections."""
    return parse_markdown(read_text(file_path))


def write_markdown(file_path: PathLike, sections: List[TodoSection]) -> None:
    """Write sections to a markdown todo file."""
    write_text(file_path, format_markdown(sections))
    log.debug("Wrote %d sections to %s", len(sections), file_path)
