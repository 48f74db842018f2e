"""
Parser for Todo.txt lines.

Main API:
    parse_todo(line)   → Todo
    parse_todos(text)  → List[Todo]

The grammar is applied left to right, each step consuming a prefix:

    1. ``x `` completion marker, optionally followed by a date
    2. ``(A) `` priority
    3. a second (or only) date
    4. the rest is handed to the tag extractor

Parsing never fails: anything that does not fit a step (an impossible date,
a lowercase priority, ...) is left in place and ends up in the description.
"""

import logging
import re
from datetime import date
from typing import List, Optional, Tuple

from todofiles.models.todo import Todo
from todofiles.parsers.tag_extractor import extract_tags
from todofiles.utils.dates import parse_iso_date

log = logging.getLogger(__name__)

_DATE_PREFIX_RE = re.compile(r"^([0-9]{4}-[0-9]{2}-[0-9]{2})\s")
_PRIORITY_PREFIX_RE = re.compile(r"^\(([A-Z])\)\s")
_LINE_BREAK_RE = re.compile(r"\r?\n")


def _consume_date(text: str) -> Tuple[Optional[date], str]:
    """Take a leading ``YYYY-MM-DD `` off text if it is a real calendar date."""
    m = _DATE_PREFIX_RE.match(text)
    if not m:
        return None, text
    parsed = parse_iso_date(m.group(1))
    if parsed is None:
        return None, text
    return parsed, text[m.end():]


def _consume_priority(text: str) -> Tuple[Optional[str], str]:
    m = _PRIORITY_PREFIX_RE.match(text)
    if not m:
        return None, text
    return m.group(1), text[m.end():]


def parse_todo(line: str) -> Todo:
    """
    Parse a single Todo.txt line.

    A completed todo with a single date treats it as the completion date,
    whether it appears before or after the priority.

    Examples:
        parse_todo("(A) 2024-01-15 Call Mom @phone +Family due:2024-01-20")
        parse_todo("x 2024-01-16 2024-01-15 Pay bills")
    """
    text = line.strip()
    completed = False
    completion_date: Optional[date] = None
    creation_date: Optional[date] = None

    if text.startswith("x "):
        completed = True
        text = text[2:]
        completion_date, text = _consume_date(text)

    priority, text = _consume_priority(text)

    second_date, text = _consume_date(text)
    if not completed or completion_date is not None:
        creation_date = second_date
    else:
        completion_date = second_date

    description, contexts, projects, metadata = extract_tags(text.strip())

    return Todo(
        description=description,
        completed=completed,
        priority=priority,
        completion_date=completion_date,
        creation_date=creation_date,
        contexts=contexts,
        projects=projects,
        metadata=metadata,
    )


def parse_todos(text: str) -> List[Todo]:
    """
    Parse a whole Todo.txt document.

    Lines may end in ``\\n`` or ``\\r\\n``. Blank lines are skipped and the
    remaining todos keep their source order.
    """
    todos = [parse_todo(line) for line in _LINE_BREAK_RE.split(text) if line.strip()]
    log.debug("Parsed %d todos", len(todos))
    return todos
