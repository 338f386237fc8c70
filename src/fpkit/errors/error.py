"""Error record and the exceptions raised at the unwrap boundary.

Errors are plain data: a frozen model holding a message. They travel inside
Results until a caller explicitly unwraps, at which point they become an
exception (UnwrapError by default, or whatever the caller builds).
"""

from __future__ import annotations

import traceback
from collections.abc import Sequence
from typing import Any, Self

from pydantic import BaseModel

from ..foundation.config import get_settings


class Error(BaseModel):
    """Immutable description of a failure.

    Identity is the field values only, so two errors with the same message
    are equal. Subclasses may add fields (codes, sources) and still flow
    through every combinator unchanged.

    Example:
        >>> Error("disk full")
        Error(message='disk full')
        >>> str(Error("disk full"))
        'disk full'
    """

    model_config = {"frozen": True}

    message: str

    def __init__(self, message: str | None = None, /, **data: Any) -> None:
        if message is not None:
            data["message"] = message
        super().__init__(**data)

    @classmethod
    def from_message(cls, message: str) -> Self:
        """Build from raw text. Empty text is allowed."""
        return cls(message)

    @classmethod
    def from_exception(cls, exc: BaseException, *, include_traceback: bool | None = None) -> Self:
        """Build from an exception using its full description.

        With a traceback attached and include_traceback on (default from
        settings), the message is the formatted traceback followed by
        "TypeName: message"; otherwise it is just the last line.
        """
        if include_traceback is None:
            include_traceback = get_settings().include_traceback
        lines = traceback.format_exception(exc) if include_traceback else traceback.format_exception_only(exc)
        return cls("".join(lines).rstrip("\n"))

    def __str__(self) -> str:
        return self.message


class ValueAccessError(RuntimeError):
    """Raised when reading the value of a failed Result."""


class UnwrapError(Exception):
    """Default exception raised when unwrapping a failed Result."""

    __slots__ = ("errors",)

    def __init__(self, message: str, errors: Sequence[Error] = ()) -> None:
        self.errors: tuple[Error, ...] = tuple(errors)
        super().__init__(message)

    @classmethod
    def from_errors(cls, errors: Sequence[Error]) -> Self:
        """Create with the messages joined by the configured separator."""
        return cls(get_settings().fail_message_separator.join(e.message for e in errors), errors)

    @property
    def message(self) -> str:
        return str(self)
