"""Exceptions raised by the todo.txt codec and command line."""


class TodoTxtError(Exception):
    """Base class for todotxt_cli errors."""


class InvalidPriority(TodoTxtError, ValueError):
    """Exception raised when a priority falls outside ``A``..``Z``."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid priority: {value!r}")


class TaskNotFound(TodoTxtError, IndexError):
    """Exception raised when a task number does not exist in the list."""

    def __init__(self, number: int, count: int):
        self.number = number
        self.count = count
        super().__init__(f"no task {number} (list has {count} tasks)")
