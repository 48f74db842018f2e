"""
In-memory todo documents.

TodoCollection:   a flat Todo.txt file
MarkdownDocument: a markdown file of headed sections with one level of
                  subtasks

Both are built once from parsed text and never mutated. write_back()
re-serializes the stored value over the source file; it does not change the
object.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator, List, Union

from todofiles import files
from todofiles.models.todo import SECTION_KEY, Todo, TodoSection
from todofiles.parsers.markdown_parser import format_markdown, parse_markdown
from todofiles.parsers.todo_parser import parse_todos
from todofiles.utils.formatting import format_todos


@dataclass(frozen=True)
class TodoCollection:
    """An ordered, flat list of todos read from ``source_id``."""

    source_id: str = ""
    todos: List[Todo] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str, source_id: str = "") -> TodoCollection:
        return cls(source_id=source_id, todos=parse_todos(text))

    @classmethod
    def from_file(cls, file_path: files.PathLike) -> TodoCollection:
        return cls.from_text(files.read_text(file_path), source_id=str(file_path))

    def to_text(self) -> str:
        return format_todos(self.todos)

    def write_back(self) -> None:
        """Overwrite the source file with the canonical form of this collection."""
        files.write_text(self.source_id, self.to_text())

    def __len__(self) -> int:
        return len(self.todos)

    def __getitem__(self, index: int) -> Todo:
        return self.todos[index]

    def __iter__(self) -> Iterator[Todo]:
        return iter(self.todos)

    def __repr__(self) -> str:
        return f"TodoCollection({self.source_id!r}, {len(self)} tasks)"

    def _repr_html_(self) -> str:
        from todofiles.views import ListView

        return ListView(self).render()


@dataclass(frozen=True)
class MarkdownDocument:
    """
    A parsed markdown todo file.

    Length, indexing and iteration all walk the document depth-first: each
    top-level todo is immediately followed by its subtasks, section by
    section in file order.
    """

    source_id: str = ""
    sections: List[TodoSection] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str, source_id: str = "") -> MarkdownDocument:
        return cls(source_id=source_id, sections=parse_markdown(text))

    @classmethod
    def from_file(cls, file_path: files.PathLike) -> MarkdownDocument:
        return cls.from_text(files.read_text(file_path), source_id=str(file_path))

    def to_text(self) -> str:
        return format_markdown(self.sections)

    def write_back(self) -> None:
        """Overwrite the source file with the canonical form of this document."""
        files.write_text(self.source_id, self.to_text())

    def all_todos(self) -> List[Todo]:
        result: List[Todo] = []
        for section in self.sections:
            result.extend(section.all_todos())
        return result

    def flatten(self, with_section: bool = False) -> TodoCollection:
        """
        Project the document onto a flat TodoCollection.

        With ``with_section`` every todo under a heading (subtasks included)
        gets that heading recorded under the reserved ``_section`` metadata
        key, which section grouping reads.
        """
        todos: List[Todo] = []
        for section in self.sections:
            for todo in section.all_todos():
                if with_section and section.heading:
                    metadata = dict(todo.metadata)
                    metadata[SECTION_KEY] = section.heading
                    todo = replace(todo, metadata=metadata)
                todos.append(todo)
        return TodoCollection(source_id=self.source_id, todos=todos)

    def __len__(self) -> int:
        return sum(len(section) for section in self.sections)

    def __getitem__(self, index: int) -> Todo:
        return self.all_todos()[index]

    def __iter__(self) -> Iterator[Todo]:
        return iter(self.all_todos())

    def __repr__(self) -> str:
        return (
            f"MarkdownDocument({self.source_id!r}, "
            f"{len(self.sections)} sections, {len(self)} tasks)"
        )

    def _repr_html_(self) -> str:
        from todofiles.views import ListView

        return ListView(self).render()


TodoDocument = Union[TodoCollection, MarkdownDocument]


def load_file(file_path: files.PathLike) -> TodoDocument:
    """Read a todo file, choosing the markdown grammar for .md/.markdown paths."""
    if files.is_markdown_path(file_path):
        return MarkdownDocument.from_file(file_path)
    return TodoCollection.from_file(file_path)
