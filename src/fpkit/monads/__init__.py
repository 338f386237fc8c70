"""Result types and combinators for railway-oriented pipelines.

Example:
    >>> from fpkit.monads import Result, pipe
    >>>
    >>> def parse(s: str) -> Result[int]:
    ...     return Result.of_value(int(s)) if s.isdigit() else Result.of_message(f"not a number: {s}")
    >>>
    >>> pipe("20", parse, lambda n: n + 1, lambda n: n * 2).value
    42
    >>> pipe("x", parse, lambda n: n + 1, lambda n: n * 2).fail_message
    'not a number: x'
"""

from .compose import (
    attempt,
    collect,
    combine,
    compose,
    pipe,
    sequence,
    then,
    unwrap,
    unwrap_errors,
)
from .result import SUCCESS, Response, Result

__all__ = [
    # Core types
    "Response",
    "Result",
    "SUCCESS",
    # Composition
    "then",
    "compose",
    "pipe",
    # Escape hatch
    "unwrap",
    "unwrap_errors",
    # Aggregation
    "combine",
    "sequence",
    "collect",
    "attempt",
]
