"""Ordered collection of tasks with whole-file decode and encode."""

import logging
from typing import Iterable, Iterator, List, Optional

from .exceptions import TaskNotFound
from .task import Task

logger = logging.getLogger(__name__)

LINE_FEED = "\n"


class TaskList:
    """Tasks in file line order."""

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks or [])

    @classmethod
    def decode(cls, text: str) -> "TaskList":
        """Decode every line of ``text``.

        Lines are decoded leniently and then validated. The first invalid
        priority aborts the decode and no partial list is returned.

        Raises:
            InvalidPriority: If a decoded line carries an invalid priority
        """
        decoded = []
        for line in _split_lines(text):
            task = Task.parse(line)
            task.priority.validate()
            decoded.append(task)
        logger.debug(f"Decoded {len(decoded)} tasks")
        return cls(decoded)

    def encode(self) -> str:
        """Encode all tasks, one newline-terminated line each.

        Raises:
            InvalidPriority: On the first task that fails validation
        """
        return "".join(task.serialize() + LINE_FEED for task in self._tasks)

    def append(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, number: int) -> Task:
        """Return the task with 1-based ``number`` as shown by ``list``.

        Raises:
            TaskNotFound: If ``number`` is out of range
        """
        if number < 1 or number > len(self._tasks):
            raise TaskNotFound(number, len(self._tasks))
        return self._tasks[number - 1]

    def sort_by_canonical_form(self) -> None:
        """Stable sort by each task's serialized line."""
        self._tasks.sort(key=lambda task: task.serialize())

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks


def decode_list(text: str) -> TaskList:
    return TaskList.decode(text)


def encode_list(tasks: Iterable[Task]) -> str:
    return TaskList(tasks).encode()


def _split_lines(text: str) -> List[str]:
    # A trailing newline does not start another line; CRLF endings are accepted.
    lines = text.split(LINE_FEED)
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
