"""Response/Result types for error-as-data control flow.

Response is the untyped form: an ordered tuple of Errors, successful when
empty. Result[T] is-a Response that also carries a payload on success.

- Bind: then
- Functor: map
- Re-typing of failures: fail_as
- Aggregation: + / combine
- Escape hatch: unwrap, unwrap_errors

Performance notes:
- Uses __slots__ for minimal memory footprint
- Errors stored as tuples, so instances can be shared freely
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar

import orjson
from pydantic import BaseModel

from ..errors import Error, UnwrapError, ValueAccessError
from ..foundation.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger("fpkit.result")


class Response:
    """Outcome without a payload: success iff there are no errors.

    Examples:
        >>> SUCCESS.is_success
        True
        >>> (Response.fail("a") + Response.fail("b")).fail_message.splitlines()
        ['a', 'b']
    """

    __slots__ = ("_errors",)

    def __init__(self, errors: Iterable[Error] = ()) -> None:
        self._errors: tuple[Error, ...] = tuple(errors)

    # ─── Construction ────────────────────────────────────────────────

    @classmethod
    def fail(cls, message: str) -> Self:
        """Failure with a single Error built from message."""
        return cls(errors=(Error(message),))

    @classmethod
    def from_error(cls, error: Error) -> Self:
        return cls(errors=(error,))

    @classmethod
    def from_exception(cls, exc: BaseException) -> Self:
        return cls(errors=(Error.from_exception(exc),))

    # ─── Inspection ──────────────────────────────────────────────────

    @property
    def errors(self) -> tuple[Error, ...]:
        return self._errors

    @property
    def is_success(self) -> bool:
        return not self._errors

    @property
    def is_fail(self) -> bool:
        return bool(self._errors)

    @property
    def fail_message(self) -> str:
        """Error messages joined by the configured separator."""
        return get_settings().fail_message_separator.join(e.message for e in self._errors)

    # ─── Aggregation ─────────────────────────────────────────────────

    def combine(self, other: Response) -> Response:
        """New untyped Response with self's errors followed by other's."""
        return Response(self._errors + other._errors)

    def __add__(self, other: object) -> Response:
        if not isinstance(other, Response):
            return NotImplemented
        return self.combine(other)

    # ─── Re-typing ───────────────────────────────────────────────────

    def fail_as(self) -> Result[Any]:
        """Re-wrap this failure's errors into a fresh Result.

        The new instance gets its own copy of the error tuple, so it never
        aliases the source. Raises ValueError on a success.
        """
        if not self._errors:
            raise ValueError("Cannot re-type a successful response as a failure")
        return Result(errors=list(self._errors))

    # ─── Serialization ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {"is_success": self.is_success, "errors": [e.model_dump() for e in self._errors]}

    def to_json(self) -> str:
        """Render to_dict() as JSON. Pydantic payloads are dumped via model_dump()."""
        return orjson.dumps(self.to_dict(), default=_json_default).decode()

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return not self._errors

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Response):
            return NotImplemented
        return type(self) is type(other) and self._errors == other._errors

    def __hash__(self) -> int:
        return hash(self._errors)

    def __repr__(self) -> str:
        if self._errors:
            return f"Failure({[e.message for e in self._errors]!r})"
        return "Success()"


SUCCESS = Response()


class Result(Response, Generic[T]):
    """Response carrying a payload of type T when successful.

    The payload of a failure is unreachable: reading value raises
    ValueAccessError.

    Examples:
        >>> Result.of_value(5).then(lambda x: Result.of_value(x * 2)).value
        10
        >>> Result.of_message("bad").then(lambda x: Result.of_value(x * 2)).fail_message
        'bad'
    """

    __slots__ = ("_value",)

    def __init__(self, value: T | None = None, errors: Iterable[Error] = ()) -> None:
        super().__init__(errors)
        self._value = None if self._errors else value

    # ─── Construction ────────────────────────────────────────────────

    @classmethod
    def of_value(cls, value: T) -> Result[T]:
        return cls(value)

    @classmethod
    def of_error(cls, error: Error) -> Result[T]:
        return cls(errors=(error,))

    @classmethod
    def of_errors(cls, errors: Iterable[Error]) -> Result[T]:
        """Failure carrying exactly these errors, in order. Raises ValueError if empty."""
        errors = tuple(errors)
        if not errors:
            raise ValueError("A failed Result needs at least one error")
        return cls(errors=errors)

    @classmethod
    def of_exception(cls, exc: BaseException) -> Result[T]:
        return cls(errors=(Error.from_exception(exc),))

    @classmethod
    def of_message(cls, message: str) -> Result[T]:
        return cls(errors=(Error(message),))

    @classmethod
    def of(cls, obj: object) -> Result[Any]:
        """Convert whatever a stage returned into a Result.

        Results pass through as the same object; untyped Responses, Errors,
        non-empty lists/tuples of Errors and exception instances become
        failures; anything else (strings included) becomes a success value.
        """
        if isinstance(obj, Result):
            return obj
        if isinstance(obj, Response):
            return obj.fail_as() if obj._errors else cls()
        if isinstance(obj, Error):
            return cls.of_error(obj)
        if isinstance(obj, BaseException):
            return cls.of_exception(obj)
        if isinstance(obj, (list, tuple)) and obj and all(isinstance(e, Error) for e in obj):
            return cls.of_errors(obj)
        return cls(obj)

    # ─── Value Extraction ────────────────────────────────────────────

    @property
    def value(self) -> T:
        """Payload of a success. Raises ValueAccessError on a failure."""
        if self._errors:
            raise ValueAccessError(f"Cannot read the value of a failed Result: {self.fail_message}")
        return self._value  # type: ignore[return-value]

    def unwrap(self, build_failure: Callable[[str], BaseException] | None = None) -> T:
        """Return the payload, or raise build_failure(fail_message).

        Without a builder an UnwrapError carrying the errors is raised.
        """
        if not self._errors:
            return self._value  # type: ignore[return-value]
        exc = build_failure(self.fail_message) if build_failure else UnwrapError.from_errors(self._errors)
        logger.debug("Unwrapping failed result, raising %s", type(exc).__name__)
        raise exc

    def unwrap_errors(self, build_failure: Callable[[tuple[Error, ...]], BaseException] | None = None) -> T:
        """Return the payload, or raise build_failure(errors)."""
        if not self._errors:
            return self._value  # type: ignore[return-value]
        exc = build_failure(self._errors) if build_failure else UnwrapError.from_errors(self._errors)
        logger.debug("Unwrapping failed result, raising %s", type(exc).__name__)
        raise exc

    def unwrap_or(self, default: T) -> T:
        return default if self._errors else self._value  # type: ignore[return-value]

    # ─── Monad Operations ────────────────────────────────────────────

    def then(self, next_stage: Callable[[T], Result[U] | U]) -> Result[U]:
        """Bind: run next_stage on the payload, or propagate the failure.

        On failure next_stage is never called. On success a returned Result
        is handed back untouched; a raw return goes through Result.of.
        """
        if self._errors:
            return self.fail_as()
        return Result.of(next_stage(self._value))  # type: ignore[arg-type]

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """Apply f to the payload, wrapping its return as a success."""
        if self._errors:
            return self.fail_as()
        return Result(f(self._value))  # type: ignore[arg-type]

    def match(self, *, ok: Callable[[T], U], fail: Callable[[tuple[Error, ...]], U]) -> U:
        """Exhaustive case analysis over success and failure."""
        return fail(self._errors) if self._errors else ok(self._value)  # type: ignore[arg-type]

    # ─── Serialization ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if not self._errors:
            data["value"] = self._value
        return data

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented if not isinstance(other, Response) else False
        return self._errors == other._errors and self._value == other._value

    def __hash__(self) -> int:
        """Hash errors and payload; an unhashable payload hashes by errors alone."""
        try:
            return hash((self._errors, self._value))
        except TypeError:
            return hash(self._errors)

    def __repr__(self) -> str:
        return super().__repr__() if self._errors else f"Success({self._value!r})"

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields the payload if successful, nothing otherwise."""
        if not self._errors:
            yield self._value  # type: ignore[misc]


def _json_default(obj: object) -> object:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")
