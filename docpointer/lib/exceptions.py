"""
Exceptions raised while tokenizing and resolving pointers.

All failures derive from PointerError, and also from the builtin exception
closest in meaning, so callers may catch either family.
"""

from typing import Iterable, Self


class PointerError(Exception):
    """Base class for every docpointer failure."""


class PointerSyntaxError(PointerError, ValueError):
    """The pointer or its configuration cannot be tokenized."""


class MissingReferenceError(PointerError, LookupError):
    """A token did not resolve against the current node in strict mode.

    Attributes:
        token: The reference token that missed
        path: Tokens consumed successfully before the miss
        delimiter: Delimiter of the pointer being resolved
    """

    def __init__(
        self: Self, token: str, path: Iterable[str] = (), delimiter: str = "/"
    ) -> None:
        self.token: str = token
        self.path: tuple[str, ...] = tuple(path)
        self.delimiter: str = delimiter
        super().__init__(token, self.path, delimiter)

    def __str__(self: Self) -> str:
        return (
            f"Pointer references nonexistent value: "
            f"token '{self.token}' not found at '{self.location}'"
        )

    @property
    def location(self: Self) -> str:
        """Pointer prefix, escaped, addressing the node where the miss happened."""
        from docpointer.lib.tokenizer import escape

        if not self.path:
            return ""
        return "".join(self.delimiter + escape(token) for token in self.path)


class UnsupportedOperationError(PointerError, NotImplementedError):
    """The pointer uses a construct that cannot be evaluated (e.g. '-')."""

    def __init__(self: Self, token: str, reason: str) -> None:
        self.token: str = token
        self.reason: str = reason
        super().__init__(token, reason)

    def __str__(self: Self) -> str:
        return f"Pointer token '{self.token}' is not supported: {self.reason}"
