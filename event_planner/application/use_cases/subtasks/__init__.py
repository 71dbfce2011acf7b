"""Use cases for managing subtasks."""

from .create_subtask import create_subtask
from .delete_subtask import delete_subtask
from .update_subtask import update_subtask

__all__ = ["create_subtask", "delete_subtask", "update_subtask"]
