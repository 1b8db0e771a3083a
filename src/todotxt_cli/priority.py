"""Task priority for todo.txt lines."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, Dict, Mapping, Optional

from .exceptions import InvalidPriority

# One past "Z" so that the sentinel sorts after every real priority.
_NONE_VALUE = chr(ord("Z") + 1)


@dataclass(frozen=True, order=True)
class Priority:
    """A single-letter priority ``A``..``Z`` or the ``NONE`` sentinel.

    Any single character can be held; :meth:`validate` is what rejects
    values outside the allowed range.
    """

    value: str

    NONE: ClassVar["Priority"]

    @classmethod
    def parse(cls, text: Optional[str]) -> "Priority":
        """Build a priority from user input; ``None`` gives ``NONE``.

        The text is kept whole, so anything but a single letter fails
        :meth:`validate`.
        """
        if text is None:
            return cls.NONE
        return cls(text)

    def is_none(self) -> bool:
        return self.value == _NONE_VALUE

    def validate(self) -> None:
        """Raise :class:`InvalidPriority` unless ``NONE`` or ``A``..``Z``."""
        if self.is_none():
            return
        if len(self.value) != 1 or not "A" <= self.value <= "Z":
            raise InvalidPriority(self.value)

    def format(self) -> str:
        """Format as the ``(X) `` line prefix, or ``""`` for ``NONE``."""
        if self.is_none():
            return ""
        return f"({self.value}) "

    def to_bytes(self) -> bytes:
        """Encode the letter for embedding in a key/value tag."""
        return self.value.encode("utf-8")

    def __str__(self) -> str:
        return "" if self.is_none() else self.value


Priority.NONE = Priority(_NONE_VALUE)


class PriorityStyles:
    """Read-only lookup from priority to a named presentation style.

    ``NONE`` and the letters with a dedicated entry map to their own style.
    Any other valid letter falls back to the ``B`` style.
    """

    DEFAULT_STYLES: ClassVar[Dict[Priority, str]] = {
        Priority.NONE: "priority.none",
        Priority("A"): "priority.a",
        Priority("B"): "priority.b",
        Priority("C"): "priority.c",
    }
    FALLBACK = Priority("B")

    def __init__(self, styles: Optional[Mapping[Priority, str]] = None):
        """Build the lookup from ``styles`` or the default styles.

        Raises:
            ValueError: If ``styles`` has no entry for ``NONE`` or the fallback
        """
        styles = dict(styles or self.DEFAULT_STYLES)
        for required in (Priority.NONE, self.FALLBACK):
            if required not in styles:
                raise ValueError(f"priority styles need an entry for {required!r}")
        self._styles = MappingProxyType(styles)

    @property
    def styles(self) -> Mapping[Priority, str]:
        return self._styles

    def style_for(self, priority: Priority) -> str:
        """Return the style name for ``priority``.

        Raises:
            InvalidPriority: If ``priority`` is not a valid priority
        """
        priority.validate()
        if priority in self._styles:
            return self._styles[priority]
        return self._styles[self.FALLBACK]
