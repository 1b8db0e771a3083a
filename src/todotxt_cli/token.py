"""Tokenizer for todo.txt task descriptions.

A description is split on single spaces and every fragment is classified
on its own:

- ``+project`` is a project tag
- ``@context`` is a context tag
- ``key:value`` (exactly one colon) is a key/value tag
- anything else is a plain word

Reassembly joins the rendered tokens with one space, so runs of spaces
collapse and fragments with several colons stay words.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional

PROJECT_PREFIX = "+"
CONTEXT_PREFIX = "@"
KEY_VALUE_SEPARATOR = ":"
SEPARATOR = " "


class TokenType(Enum):
    """Kinds of description tokens."""
    WORD = "word"
    PROJECT_TAG = "project"
    CONTEXT_TAG = "context"
    KEY_VALUE_TAG = "key_value"


@dataclass
class Token:
    """One description fragment. ``key`` is only set for key/value tags."""
    type: TokenType
    value: str
    key: Optional[str] = None

    @classmethod
    def parse(cls, fragment: str) -> "Token":
        """Classify a single space-free fragment."""
        if fragment.startswith(PROJECT_PREFIX):
            return cls(TokenType.PROJECT_TAG, fragment[len(PROJECT_PREFIX):])
        if fragment.startswith(CONTEXT_PREFIX):
            return cls(TokenType.CONTEXT_TAG, fragment[len(CONTEXT_PREFIX):])
        if fragment.count(KEY_VALUE_SEPARATOR) == 1:
            key, value = fragment.split(KEY_VALUE_SEPARATOR)
            return cls(TokenType.KEY_VALUE_TAG, value, key=key)
        return cls(TokenType.WORD, fragment)

    @classmethod
    def word(cls, value: str) -> "Token":
        return cls(TokenType.WORD, value)

    @classmethod
    def project(cls, value: str) -> "Token":
        return cls(TokenType.PROJECT_TAG, value)

    @classmethod
    def context(cls, value: str) -> "Token":
        return cls(TokenType.CONTEXT_TAG, value)

    @classmethod
    def key_value(cls, key: str, value: str) -> "Token":
        return cls(TokenType.KEY_VALUE_TAG, value, key=key)

    def format(self) -> str:
        """Render the token back to its description text."""
        if self.type is TokenType.PROJECT_TAG:
            return PROJECT_PREFIX + self.value
        if self.type is TokenType.CONTEXT_TAG:
            return CONTEXT_PREFIX + self.value
        if self.type is TokenType.KEY_VALUE_TAG:
            return f"{self.key or ''}{KEY_VALUE_SEPARATOR}{self.value}"
        return self.value

    def __str__(self) -> str:
        return self.format()


def tokenize(text: str) -> List[Token]:
    """Split a description into classified tokens.

    Empty fragments between consecutive spaces are dropped.
    """
    return [Token.parse(fragment) for fragment in text.split(SEPARATOR) if fragment]


def format_tokens(tokens: Iterable[Token]) -> str:
    """Join rendered tokens with a single space."""
    return SEPARATOR.join(token.format() for token in tokens)


def projects(tokens: Iterable[Token]) -> List[str]:
    """Project names in description order."""
    return [t.value for t in tokens if t.type is TokenType.PROJECT_TAG]


def contexts(tokens: Iterable[Token]) -> List[str]:
    """Context names in description order."""
    return [t.value for t in tokens if t.type is TokenType.CONTEXT_TAG]


def key_values(tokens: Iterable[Token]) -> Dict[str, str]:
    """Key/value tags as a dict; a repeated key keeps its last value."""
    return {t.key: t.value for t in tokens if t.type is TokenType.KEY_VALUE_TAG}
