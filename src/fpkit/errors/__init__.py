"""Error types for fpkit.

- Error: immutable, message-only failure record carried by Results
- UnwrapError: default exception raised at the unwrap boundary
- ValueAccessError: reading the payload of a failed Result
"""

from .error import Error, UnwrapError, ValueAccessError

__all__ = ["Error", "UnwrapError", "ValueAccessError"]
