"""fpkit - Result types for pure pipelines of fallible operations.

A Result is either a success holding a payload or a failure holding one or
more Errors. Combinators chain fallible steps and stop at the first failure
without raising; unwrap converts back to exceptions at the outer boundary.

Quick Start:
    >>> from fpkit import Result, pipe, unwrap
    >>>
    >>> def load(user_id: int) -> Result[dict]:
    ...     return Result.of_value({"id": user_id}) if user_id > 0 else Result.of_message("unknown user")
    >>>
    >>> pipe(7, load, lambda u: u["id"], str).value
    '7'
    >>> unwrap(load(-1), ValueError)
    Traceback (most recent call last):
    ...
    ValueError: unknown user
"""

from .errors import Error, UnwrapError, ValueAccessError
from .foundation.config import FpkitSettings, clear_settings_cache, get_settings
from .monads import (
    SUCCESS,
    Response,
    Result,
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

__version__ = "0.1.0"

__all__ = [
    # Errors
    "Error",
    "UnwrapError",
    "ValueAccessError",
    # Results
    "Response",
    "Result",
    "SUCCESS",
    # Combinators
    "then",
    "compose",
    "pipe",
    "unwrap",
    "unwrap_errors",
    "combine",
    "sequence",
    "collect",
    "attempt",
    # Settings
    "FpkitSettings",
    "get_settings",
    "clear_settings_cache",
]
