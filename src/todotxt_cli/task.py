"""Task model and the todo.txt line codec."""

import logging
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from . import date as dates
from .priority import Priority
from .token import Token, format_tokens, tokenize
from . import token as tokens

logger = logging.getLogger(__name__)

COMPLETED_PREFIX = "x "
PRIORITY_RE = re.compile(r"\(([A-Z])\) ")
DATE_RE = re.compile(r"([0-9]{2,4}-[0-9]{2}-[0-9]{2}) ")
MAX_LEADING_DATES = 2
ARCHIVED_PRIORITY_KEY = "pri"


@dataclass
class Task:
    """A single todo.txt line in structured form."""

    completed: bool = False
    priority: Priority = Priority.NONE
    completion_date: Optional[date] = dates.ABSENT
    creation_date: Optional[date] = dates.ABSENT
    description: List[Token] = field(default_factory=list)

    @classmethod
    def parse(cls, line: str) -> "Task":
        """Decode a raw line.

        The line is scanned left to right. Each step matches a prefix
        anchored at the current position and consumes it on a match:
        completion marker, priority, up to two dates, then the description.
        This never raises; dates that do not parse become absent.
        """
        task = cls()
        text = line

        if text.startswith(COMPLETED_PREFIX):
            task.completed = True
            text = text[len(COMPLETED_PREFIX):]

        match = PRIORITY_RE.match(text)
        if match:
            task.priority = Priority(match.group(1))
            text = text[match.end():]

        slots: List[Optional[date]] = []
        for _ in range(MAX_LEADING_DATES):
            match = DATE_RE.match(text)
            if not match:
                break
            slots.append(dates.parse(match.group(1)))
            text = text[match.end():]
        slots.extend([dates.ABSENT] * (MAX_LEADING_DATES - len(slots)))

        if task.completed:
            task.completion_date, task.creation_date = slots
        else:
            task.creation_date = slots[0]

        task.description = tokenize(text)
        return task

    @classmethod
    def new(cls, text: str) -> "Task":
        """Create a task from user input, stamped with today's creation date."""
        task = cls.parse(text)
        task.creation_date = dates.now()
        return task

    def validate(self) -> None:
        """Check the priority and normalize the completion date.

        Raises:
            InvalidPriority: If the priority is not ``NONE`` or ``A``..``Z``
        """
        self.priority.validate()
        if not self.completed and not dates.is_absent(self.completion_date):
            logger.debug("Clearing completion date of an open task")
            self.completion_date = dates.ABSENT
        if (
            self.completed
            and dates.is_absent(self.completion_date)
            and dates.is_absent(self.creation_date)
        ):
            self.completion_date = dates.ABSENT

    def serialize(self) -> str:
        """Encode the task as its canonical line (without newline).

        Raises:
            InvalidPriority: If the priority is invalid; nothing is produced
        """
        self.validate()
        parts = [
            COMPLETED_PREFIX if self.completed else "",
            self.priority.format(),
            dates.format(self.completion_date),
            dates.format(self.creation_date),
            format_tokens(self.description),
        ]
        return "".join(parts)

    def __str__(self) -> str:
        return self.serialize()

    def mark_completed(self) -> None:
        """Complete the task.

        Stamps today's completion date when a creation date is known and
        moves a real priority into the description as ``pri:X``. Calling
        this on a completed task does nothing.
        """
        if self.completed:
            return
        self.completed = True
        if not dates.is_absent(self.creation_date):
            self.completion_date = dates.now()
        if not self.priority.is_none():
            self.description.append(
                Token.key_value(ARCHIVED_PRIORITY_KEY, self.priority.value)
            )
            self.priority = Priority.NONE

    def set_priority(self, priority: Priority) -> None:
        self.priority = priority

    def clear_priority(self) -> None:
        self.priority = Priority.NONE

    @property
    def description_text(self) -> str:
        return format_tokens(self.description)

    def set_description(self, text: str) -> None:
        self.description = tokenize(text)

    def append_description(self, text: str) -> None:
        """Append words to the end of the description."""
        current = self.description_text
        self.set_description(f"{current} {text}" if current else text)

    @property
    def projects(self) -> List[str]:
        return tokens.projects(self.description)

    @property
    def contexts(self) -> List[str]:
        return tokens.contexts(self.description)

    @property
    def tags(self) -> Dict[str, str]:
        return tokens.key_values(self.description)


def decode_task(line: str, strict: bool = False) -> Task:
    """Decode a line; with ``strict`` the result is validated as well."""
    task = Task.parse(line)
    if strict:
        task.validate()
    return task


def encode_task(task: Task) -> str:
    """Encode a task, propagating :class:`InvalidPriority`."""
    return task.serialize()
