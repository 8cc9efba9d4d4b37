"""Error taxonomy for Try and Either.

Faults raised inside a Try are captured as data and never appear here; these
are the errors the library itself raises, either as synthetic faults (filter
rejection, unsupported state) or for programmer errors (Bottom matching,
absent payloads).
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'BottomError',
    'FilterRejectedError',
    'NullPayloadError',
    'TryEitherError',
    'UnsupportedStateError',
]


class TryEitherError(Exception):
    """Base exception class for errors raised by tryeither.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from tryeither import Bottom, TryEitherError

        try:
            Bottom.match(right=str, left=str)
        except TryEitherError as e:
            print(e.code)  # 'bottom'
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        """Initialize a TryEitherError.

        Args:
            message (str): A human-readable description of the error.
            code (str | None): An optional error code for programmatic error handling.
        """
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


class BottomError(TryEitherError):
    """An Either in the Bottom state reached a point that needs a Left or Right.

    Raised by `match` and `unwrap` because no handler exists for Bottom.
    """

    def __init__(self, operation: str = 'match') -> None:
        self.operation = operation
        super().__init__(f'{operation}() called on Bottom: Either holds neither Left nor Right', code='bottom')


class NullPayloadError(TryEitherError, ValueError):
    """Left or Right was constructed with None as its payload."""

    def __init__(self, side: str) -> None:
        self.side = side
        super().__init__(f'{side}() requires a value, got None', code='null_payload')


class FilterRejectedError(TryEitherError):
    """Fault recorded when a Try's bound value fails a filter predicate.

    Attributes:
        value: The rejected value. When `bifilter` rejects a failure this
            is the rejected exception.
    """

    def __init__(self, value: Any = None) -> None:
        self.value = value
        super().__init__(f'value rejected by filter: {value!r}', code='filtered')


class UnsupportedStateError(TryEitherError):
    """An operation was asked for a payload the current state does not have."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code='unsupported')
