"""Terminal presentation for todo.txt tasks.

Rendering decorates the codec's plain text with a rich style; the task
model itself knows nothing about colors.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from .priority import PriorityStyles
from .task import Task

logger = logging.getLogger(__name__)

COMPLETED_STYLE = "task.completed"
NUMBER_STYLE = "task.number"
ERROR_STYLE = "error"

TODOTXT_THEME = Theme({
    "priority.none": "default",
    "priority.a": "yellow bold",
    "priority.b": "green",
    "priority.c": "bright_blue",
    COMPLETED_STYLE: "bright_black",
    NUMBER_STYLE: "dim",
    "success": "green",
    "warning": "yellow",
    ERROR_STYLE: "red bold",
})


def get_themed_console(plain: bool = False, **kwargs) -> Console:
    """Get a console with the todo.txt theme applied.

    Args:
        plain: Disable colors and highlighting entirely
        **kwargs: Passed through to :class:`rich.console.Console`

    Returns:
        Configured console
    """
    if plain:
        kwargs.setdefault("no_color", True)
        kwargs.setdefault("highlight", False)
    return Console(theme=TODOTXT_THEME, **kwargs)


class TaskRenderer:
    """Styles a task's canonical line for display."""

    def __init__(self, styles: Optional[PriorityStyles] = None):
        self.styles = styles or PriorityStyles()

    def style_for(self, task: Task) -> str:
        if task.completed:
            return COMPLETED_STYLE
        return self.styles.style_for(task.priority)

    def render(self, task: Task) -> Text:
        """Render a task.

        Raises:
            InvalidPriority: If the task cannot be serialized
        """
        return Text(task.serialize(), style=self.style_for(task))

    def render_numbered(self, number: int, task: Task) -> Text:
        line = Text(f"{number} ", style=NUMBER_STYLE)
        line.append_text(self.render(task))
        return line
