"""
Core todo data models.

A Todo holds every structured field of a Todo.txt line separately from its
tag-free description. utils.formatting defines the canonical rendering back
to text, so the model IS the source of truth and no raw line is stored.

Reserved metadata key:
    ``_section`` records the heading a todo was flattened out of
    (MarkdownDocument.flatten(with_section=True)). A ``_section:value`` tag
    written in a file is read the same way: it is never shown as a tag and
    section grouping files the todo under ``value``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from todofiles.utils.dates import parse_iso_date

# Reserved metadata key holding the originating markdown heading.
# Only section grouping reads it; views never render it as a tag.
SECTION_KEY = "_section"


@dataclass(frozen=True)
class Todo:
    """
    A single task line.

    Subtasks only exist for todos read from markdown files and are a single
    level deep: a subtask never carries subtasks of its own.
    """

    description: str = ""
    completed: bool = False
    priority: Optional[str] = None
    completion_date: Optional[date] = None
    creation_date: Optional[date] = None
    contexts: List[str] = field(default_factory=list)
    projects: List[str] = field(default_factory=list)
    metadata: Dict[str, str] = field(default_factory=dict)
    subtasks: List[Todo] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.priority is not None and not (
            len(self.priority) == 1 and "A" <= self.priority <= "Z"
        ):
            raise ValueError(f"Priority must be a single letter A-Z, got {self.priority!r}")
        for subtask in self.subtasks:
            if subtask.subtasks:
                raise ValueError("Subtasks cannot have subtasks of their own")

    @classmethod
    def from_text(
        cls,
        description: str,
        *,
        completed: bool = False,
        priority: Optional[str] = None,
        completion_date: Optional[date] = None,
        creation_date: Optional[date] = None,
        contexts: Optional[List[str]] = None,
        projects: Optional[List[str]] = None,
        metadata: Optional[Dict[str, str]] = None,
        subtasks: Optional[List[Todo]] = None,
    ) -> Todo:
        """
        Build a Todo from free text, pulling tags out of the description.

        Explicitly passed contexts, projects or metadata replace the values
        found in the text.
        """
        from todofiles.parsers.tag_extractor import extract_tags

        plain, found_contexts, found_projects, found_metadata = extract_tags(description)
        return cls(
            description=plain,
            completed=completed,
            priority=priority,
            completion_date=completion_date,
            creation_date=creation_date,
            contexts=list(contexts) if contexts is not None else found_contexts,
            projects=list(projects) if projects is not None else found_projects,
            metadata=dict(metadata) if metadata is not None else found_metadata,
            subtasks=list(subtasks or []),
        )

    @property
    def due(self) -> Optional[date]:
        """The ``due:`` metadata value as a date, if it is a valid one."""
        return parse_iso_date(self.metadata.get("due"))

    @property
    def section(self) -> Optional[str]:
        """Originating heading injected by MarkdownDocument.flatten()."""
        return self.metadata.get(SECTION_KEY) or None

    def __str__(self) -> str:
        from todofiles.utils.formatting import format_todo

        return format_todo(self)

    def __repr__(self) -> str:
        return f"Todo({self})"


@dataclass(frozen=True)
class TodoSection:
    """
    A heading and the top-level todos beneath it.

    ``level`` is the number of ``#`` characters, or 0 for todos that appear
    before any heading (in which case ``heading`` is empty).
    """

    heading: str = ""
    level: int = 0
    todos: List[Todo] = field(default_factory=list)

    def all_todos(self) -> List[Todo]:
        """Top-level todos, each followed by its subtasks."""
        result: List[Todo] = []
        for todo in self.todos:
            result.append(todo)
            result.extend(todo.subtasks)
        return result

    def __len__(self) -> int:
        return sum(1 + len(todo.subtasks) for todo in self.todos)

    def __repr__(self) -> str:
        return f"TodoSection({self.heading!r}, level={self.level}, {len(self)} tasks)"
