"""
Parser for markdown todo lists.

Main API:
    parse_markdown(text)          → List[TodoSection]
    format_markdown(sections)     → str

Recognised lines:

    # Heading            (1-6 '#' characters; starts a new section)
    - (A) Todo.txt line  (top-level todo)
        - subtask line   (any indentation; attaches to the previous todo)

Blank lines and anything else are ignored. Nesting is a single level: a
deeper-indented item still becomes a subtask of the last top-level todo.
"""

import logging
import re
from dataclasses import replace
from typing import List, Tuple

from todofiles.models.todo import Todo, TodoSection
from todofiles.parsers.todo_parser import parse_todo
from todofiles.utils.formatting import format_todo

log = logging.getLogger(__name__)

_HEADING_RE = re.compile(r"^(#{1,6}) (.+)$")
_ITEM_RE = re.compile(r"^(\s*)- (.+)$")
_LINE_BREAK_RE = re.compile(r"\r?\n")

SUBTASK_INDENT = "    "


def _build_section(heading: str, level: int, entries: List[Tuple[Todo, List[Todo]]]) -> TodoSection:
    todos = [replace(todo, subtasks=subtasks) if subtasks else todo for todo, subtasks in entries]
    return TodoSection(heading=heading, level=level, todos=todos)


def parse_markdown(text: str) -> List[TodoSection]:
    """
    Parse markdown content into sections.

    Todos before the first heading land in a level-0 section with an empty
    heading; that section is only kept if it has todos. Headed sections are
    always kept, even when empty.
    """
    sections: List[TodoSection] = []
    heading = ""
    level = 0
    entries: List[Tuple[Todo, List[Todo]]] = []

    def flush() -> None:
        if entries or level > 0:
            sections.append(_build_section(heading, level, entries))

    for line in _LINE_BREAK_RE.split(text):
        line = line.rstrip()
        if not line:
            continue

        m = _HEADING_RE.match(line)
        if m:
            flush()
            level = len(m.group(1))
            heading = m.group(2).strip()
            entries = []
            continue

        m = _ITEM_RE.match(line)
        if m:
            todo = parse_todo(m.group(2))
            if m.group(1) and entries:
                entries[-1][1].append(todo)
            else:
                entries.append((todo, []))

    flush()
    log.debug("Parsed %d sections", len(sections))
    return sections


def format_markdown(sections: List[TodoSection]) -> str:
    """
    Serialize sections back to markdown.

    Each section is its heading (if it has one) followed by ``- `` todo
    lines, with subtasks indented four spaces. Sections are separated by a
    blank line and the output ends with a newline.
    """
    blocks: List[str] = []
    for section in sections:
        lines: List[str] = []
        if section.level > 0 and section.heading:
            lines.append(f"{'#' * section.level} {section.heading}")
        for todo in section.todos:
            lines.append(f"- {format_todo(todo)}")
            for subtask in todo.subtasks:
                lines.append(f"{SUBTASK_INDENT}- {format_todo(subtask)}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"
