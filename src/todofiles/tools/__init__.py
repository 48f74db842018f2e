from .todo_tools import register_todo_tools

__all__ = ["register_todo_tools"]
