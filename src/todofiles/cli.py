#!/usr/bin/env python3
"""
todofiles - command-line interface for Todo.txt and markdown todo files

Usage:
    todofiles list <file> [filters]
    todofiles render <file> [--view VIEW] [--group-by DIM] [--today DATE] [--output PATH]
    todofiles table <file>
    todofiles normalize <file>

Examples:
    todofiles list todo.txt --pending --project Family
    todofiles render todo.txt --view kanban --group-by projects --output board.html
    todofiles render todos.md --view due --today tomorrow
    todofiles normalize todo.txt
"""

import argparse
import logging
import sys
from datetime import date

from todofiles import files
from todofiles.errors import UsageError
from todofiles.models.collection import MarkdownDocument, load_file
from todofiles.models.table import column_names, rows
from todofiles.tools.todo_tools import resolve_today
from todofiles.utils.formatting import format_todo
from todofiles.views import GROUP_BY_CHOICES, VIEW_CHOICES, html_view

log = logging.getLogger(__name__)


def _matches(todo, args) -> bool:
    """Apply list filters to a single todo."""
    if args.pending and todo.completed:
        return False
    if args.done and not todo.completed:
        return False
    if args.priority and todo.priority != args.priority.upper():
        return False
    if args.context and args.context not in todo.contexts:
        return False
    if args.project and args.project not in todo.projects:
        return False
    return True


def _cell(value) -> str:
    """Plain-text rendering of one table cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "x" if value else ""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return " ".join(f"{k}:{v}" for k, v in sorted(value.items()))
    if isinstance(value, list):
        if value and not isinstance(value[0], str):
            return str(len(value))
        return ",".join(value)
    return str(value)


# --- commands ---

def list_todos(args):
    """Print todos, one per line, numbered in file order."""
    document = load_file(args.file)

    if isinstance(document, MarkdownDocument):
        number = 0
        for section in document.sections:
            if section.heading:
                print(f"{'#' * section.level} {section.heading}")
            for todo in section.todos:
                number += 1
                if _matches(todo, args):
                    print(f"{number:>3}. {format_todo(todo)}")
                for subtask in todo.subtasks:
                    number += 1
                    if _matches(subtask, args):
                        print(f"{number:>3}.     {format_todo(subtask)}")
        return

    for number, todo in enumerate(document, start=1):
        if _matches(todo, args):
            print(f"{number:>3}. {format_todo(todo)}")


def render(args):
    """Render a file through one of the HTML views."""
    document = load_file(args.file)
    today = resolve_today(args.today) if args.view == "due" else None
    html = html_view(document, view=args.view, group_by=args.group_by, today=today).render()

    if args.output:
        files.write_text(args.output, html)
        print(f"Wrote {args.view} view of {len(document)} task(s) to {args.output}")
    else:
        print(html)


def table(args):
    """Print every todo as a tab-separated row."""
    document = load_file(args.file)
    names = column_names()
    print("\t".join(names))
    for r in rows(document):
        print("\t".join(_cell(r[name]) for name in names))


def normalize(args):
    """Rewrite a file in canonical form."""
    document = load_file(args.file)
    document.write_back()
    print(f"Normalized {args.file}: {len(document)} task(s)")


# --- main ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todofiles",
        description="Parse, normalize and render Todo.txt and markdown todo files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # --- list ---
    list_p = subparsers.add_parser("list", help="List todos")
    list_p.add_argument("file", help="Path to todo.txt or markdown file")
    list_p.add_argument("--pending", action="store_true", help="Show only pending todos")
    list_p.add_argument("--done", action="store_true", help="Show only completed todos")
    list_p.add_argument("--priority", help="Filter by priority letter")
    list_p.add_argument("--context", help="Filter by @context (without the @)")
    list_p.add_argument("--project", help="Filter by +project (without the +)")
    list_p.set_defaults(func=list_todos)

    # --- render ---
    render_p = subparsers.add_parser("render", help="Render an HTML view")
    render_p.add_argument("file", help="Path to todo.txt or markdown file")
    render_p.add_argument("--view", choices=VIEW_CHOICES, default="list", help="View to render")
    render_p.add_argument("--group-by", choices=GROUP_BY_CHOICES, default="priority",
                          help="Kanban grouping (default: priority)")
    render_p.add_argument("--today", help="Reference day for the due view (YYYY-MM-DD, today, tomorrow, friday, etc.)")
    render_p.add_argument("--output", "-o", help="Write HTML to this file instead of stdout")
    render_p.set_defaults(func=render)

    # --- table ---
    table_p = subparsers.add_parser("table", help="Print todos as tab-separated columns")
    table_p.add_argument("file", help="Path to todo.txt or markdown file")
    table_p.set_defaults(func=table)

    # --- normalize ---
    normalize_p = subparsers.add_parser("normalize", help="Rewrite a file in canonical form")
    normalize_p.add_argument("file", help="Path to todo.txt or markdown file")
    normalize_p.set_defaults(func=normalize)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        args.func(args)
    except (UsageError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
