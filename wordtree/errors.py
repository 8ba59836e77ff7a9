"""
Exception hierarchy shared by every wordtree module.

Each error also derives from the builtin it refines (KeyError / ValueError),
so callers that already catch those keep working.
"""

from __future__ import annotations


class WordTreeError(Exception):
    """Base class for all wordtree errors."""


class NotFound(WordTreeError, KeyError):
    """A word is not present in the list it was looked up in."""

    def __init__(self, word: str, list_name: str = "list"):
        self.word = word
        self.list_name = list_name
        super().__init__(f"{word!r} not in {list_name}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class InvalidFormat(WordTreeError, ValueError):
    """Response text is not 5 characters over the b/y/g alphabet."""


class LoadError(WordTreeError, ValueError):
    """A word-list line is malformed. Loading aborts at the first one."""

    def __init__(self, path: str, line_number: int, line: str, reason: str):
        self.path = path
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"{path}:{line_number}: {reason}: {line!r}")


class EmptyInput(WordTreeError, ValueError):
    """A ranking or search was asked about an empty candidate subset."""
