"""@trying decorator: turn a function into a lazy Try factory."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from tryeither.try_ import Try

__all__ = ['trying']


@overload
def trying[**P, T](func: Callable[P, T]) -> Callable[P, Try[T]]: ...


@overload
def trying[**P, T](
    func: None = None,
    *,
    memoize: bool | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Try[T]]]: ...


def trying[**P, T](
    func: Callable[P, T] | None = None,
    *,
    memoize: bool | None = None,
) -> Any:
    """Decorator that defers a function call into a Try.

    Calling the decorated function does not run it: the arguments are
    captured and a Try is returned that runs the call when inspected.

    Can be used with or without arguments:
        @trying
        def load(): ...

        @trying(memoize=False)
        def poll(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        memoize: Memoization for the returned Trys. Defaults to the configured value.

    Returns:
        A wrapped function that returns Try[T] instead of T.

    Example:
        ```python
        @trying
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2).run()
        # Success(value=5.0)
        divide(10, 0).is_fail()
        # True
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Try[T]:
        return Try(lambda: wrapped(*args, **kwargs), memoize=memoize)

    if func is not None:
        return wrapper(func)
    return wrapper
