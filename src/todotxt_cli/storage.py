"""Storage layer: reads and writes a todo.txt file as a unit."""

import logging
from pathlib import Path
from typing import Optional

from .config import ConfigModel
from .tasklist import TaskList

logger = logging.getLogger(__name__)


class Storage:
    """File-based storage for a single todo.txt list."""

    def __init__(self, config: ConfigModel, todo_file: Optional[str] = None):
        self.config = config
        self.path: Path = config.get_todo_path(todo_file)

    def load(self) -> TaskList:
        """Load the task list. A missing file is an empty list.

        Raises:
            InvalidPriority: If a line carries an invalid priority
            OSError: If the file exists but cannot be read
        """
        if not self.path.exists():
            logger.debug(f"{self.path} does not exist, starting with an empty list")
            return TaskList()

        with open(self.path, "r", encoding="utf-8") as f:
            content = f.read()

        tasks = TaskList.decode(content)
        logger.debug(f"Loaded {len(tasks)} tasks from {self.path}")
        return tasks

    def save(self, tasks: TaskList) -> None:
        """Write the task list, replacing the file.

        The list is fully encoded before the file is opened, so a task that
        fails validation leaves the existing file untouched.

        Raises:
            InvalidPriority: If any task fails validation
        """
        content = tasks.encode()

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.debug(f"Saved {len(tasks)} tasks to {self.path}")
