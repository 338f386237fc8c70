"""Free-function combinators over Results.

Stages are plain callables taking the previous payload. They run strictly
left to right and never after an earlier stage has failed; the first
failure is re-typed (fail_as) and returned as the pipeline's outcome.

Example:
    >>> pipe(3, lambda v: v + 1, lambda v: v * 2, str).value
    '8'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, ParamSpec, TypeVar, overload

from ..errors import Error
from ..foundation.config import get_settings
from .result import Response, Result

P = ParamSpec("P")
T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")

logger = logging.getLogger("fpkit.compose")

# A stage may return a Result or anything Result.of converts
Stage = Callable[[Any], Any]


# ═══════════════════════════════════════════════════════════════════════════════
# Bind
# ═══════════════════════════════════════════════════════════════════════════════


def then(result: Result[A], next_stage: Callable[[A], Result[B] | B]) -> Result[B]:
    """Sequential bind. See Result.then."""
    return result.then(next_stage)


# ═══════════════════════════════════════════════════════════════════════════════
# Compose / Pipe
# ═══════════════════════════════════════════════════════════════════════════════


@overload
def compose(
    first: Callable[[], Result[A] | A],
    stage_b: Callable[[A], Result[B] | B],
    stage_c: Callable[[B], Result[C] | C],
    /,
) -> Callable[[], Result[C]]: ...
@overload
def compose(
    first: Callable[[], Result[A] | A],
    stage_b: Callable[[A], Result[B] | B],
    stage_c: Callable[[B], Result[C] | C],
    stage_d: Callable[[C], Result[D] | D],
    /,
) -> Callable[[], Result[D]]: ...
@overload
def compose(
    first: Callable[[], Result[A] | A],
    stage_b: Callable[[A], Result[B] | B],
    stage_c: Callable[[B], Result[C] | C],
    stage_d: Callable[[C], Result[D] | D],
    stage_e: Callable[[D], Result[E] | E],
    /,
) -> Callable[[], Result[E]]: ...
@overload
def compose(
    first: Callable[[], Result[A] | A],
    stage_b: Callable[[A], Result[B] | B],
    stage_c: Callable[[B], Result[C] | C],
    stage_d: Callable[[C], Result[D] | D],
    stage_e: Callable[[D], Result[E] | E],
    stage_f: Callable[[E], Result[F] | F],
    /,
) -> Callable[[], Result[F]]: ...
@overload
def compose(first: Callable[[], Any], /, *stages: Stage) -> Callable[[], Result[Any]]: ...
def compose(first: Callable[[], Any], /, *stages: Stage) -> Callable[[], Result[Any]]:
    """Build a zero-argument pipeline: first(), then each stage in order.

    Nothing runs until the returned callable is invoked. Each invocation
    re-runs the whole chain and re-reads the stage tracing setting.
    """

    def run() -> Result[Any]:
        trace = get_settings().trace_stages
        current = Result.of(first())
        for index, stage in enumerate(stages, start=1):
            if current.is_fail:
                logger.debug("Pipeline short-circuited before stage %d of %d", index, len(stages))
                return current.fail_as()
            if trace:
                logger.debug("Running stage %d: %s", index, getattr(stage, "__qualname__", repr(stage)))
            current = Result.of(stage(current.value))
        return current

    return run


@overload
def pipe(
    value: T,
    stage_a: Callable[[T], Result[A] | A],
    stage_b: Callable[[A], Result[B] | B],
    stage_c: Callable[[B], Result[C] | C],
    /,
) -> Result[C]: ...
@overload
def pipe(
    value: T,
    stage_a: Callable[[T], Result[A] | A],
    stage_b: Callable[[A], Result[B] | B],
    stage_c: Callable[[B], Result[C] | C],
    stage_d: Callable[[C], Result[D] | D],
    /,
) -> Result[D]: ...
@overload
def pipe(
    value: T,
    stage_a: Callable[[T], Result[A] | A],
    stage_b: Callable[[A], Result[B] | B],
    stage_c: Callable[[B], Result[C] | C],
    stage_d: Callable[[C], Result[D] | D],
    stage_e: Callable[[D], Result[E] | E],
    /,
) -> Result[E]: ...
@overload
def pipe(
    value: T,
    stage_a: Callable[[T], Result[A] | A],
    stage_b: Callable[[A], Result[B] | B],
    stage_c: Callable[[B], Result[C] | C],
    stage_d: Callable[[C], Result[D] | D],
    stage_e: Callable[[D], Result[E] | E],
    stage_f: Callable[[E], Result[F] | F],
    /,
) -> Result[F]: ...
@overload
def pipe(value: Any, /, *stages: Stage) -> Result[Any]: ...
def pipe(value: Any, /, *stages: Stage) -> Result[Any]:
    """Feed value into the first stage and run the composed chain immediately."""
    if not stages:
        raise TypeError("pipe() needs at least one stage")
    first, *rest = stages
    return compose(lambda: first(value), *rest)()


# ═══════════════════════════════════════════════════════════════════════════════
# Unwrap
# ═══════════════════════════════════════════════════════════════════════════════


def unwrap(result: Result[T], build_failure: Callable[[str], BaseException] | None = None) -> T:
    """Payload on success; otherwise raise build_failure(fail_message)."""
    return result.unwrap(build_failure)


def unwrap_errors(
    result: Result[T],
    build_failure: Callable[[tuple[Error, ...]], BaseException] | None = None,
) -> T:
    """Payload on success; otherwise raise build_failure(errors)."""
    return result.unwrap_errors(build_failure)


# ═══════════════════════════════════════════════════════════════════════════════
# Aggregation
# ═══════════════════════════════════════════════════════════════════════════════


def combine(*responses: Response) -> Response:
    """Concatenate the errors of every response, left to right."""
    return Response(error for r in responses for error in r.errors)


def sequence(results: Iterable[Result[T]]) -> Result[list[T]]:
    """[Result[T]] → Result[list[T]]. Fail-fast on the first failure."""
    values: list[T] = []
    for r in results:
        if r.is_fail:
            return r.fail_as()
        values.append(r.value)
    return Result(values)


def collect(results: Iterable[Result[T]]) -> Result[list[T]]:
    """[Result[T]] → Result[list[T]], accumulating ALL errors in order."""
    values: list[T] = []
    errors: list[Error] = []
    for r in results:
        if r.is_fail:
            errors.extend(r.errors)
        else:
            values.append(r.value)
    return Result(errors=errors) if errors else Result(values)


def attempt(fn: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Result[T]:
    """Call fn, turning a raised Exception into a failed Result."""
    try:
        returned = fn(*args, **kwargs)
    except Exception as e:
        logger.debug("Captured %s from %s", type(e).__name__, getattr(fn, "__qualname__", repr(fn)))
        return Result.of_exception(e)
    return Result.of(returned)
