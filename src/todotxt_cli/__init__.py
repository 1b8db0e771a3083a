"""todotxt CLI - read, edit and print todo.txt task lists."""

__version__ = "0.1.0"

from .exceptions import InvalidPriority, TaskNotFound, TodoTxtError
from .priority import Priority, PriorityStyles
from .token import Token, TokenType
from .task import Task, decode_task, encode_task
from .tasklist import TaskList, decode_list, encode_list

__all__ = [
    "InvalidPriority",
    "TaskNotFound",
    "TodoTxtError",
    "Priority",
    "PriorityStyles",
    "Token",
    "TokenType",
    "Task",
    "decode_task",
    "encode_task",
    "TaskList",
    "decode_list",
    "encode_list",
    "__version__",
]
