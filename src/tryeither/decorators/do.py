"""@do and @do_try decorators for generator-based do-notation."""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import wrapt

from tryeither.either import BottomType, Either, Left, Right
from tryeither.try_ import Failure, Try

__all__ = ['do', 'do_try']


def do[**P, L, T](
    func: Callable[P, Generator[Either[L, Any], Any, T]],
) -> Callable[P, Either[L, T]]:
    """Decorator for generator-based do-notation with Either.

    Yield Either values to extract their Right values; the first Left or
    Bottom yielded is returned immediately and the generator is closed.
    The generator's return value is wrapped in Right, so it must not be None.

    Args:
        func: A generator function that yields Eithers and returns T.

    Returns:
        A function that returns Either[L, T].

    Example:
        ```python
        @do
        def total():
            x = yield parse(a)   # returns the Left early if parse(a) is Left
            y = yield parse(b)
            return x + y
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Generator[Either[L, Any], Any, T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Either[L, T]:
        gen = wrapped(*args, **kwargs)
        try:
            step = next(gen)
            while True:
                if isinstance(step, Left | BottomType):
                    gen.close()
                    return step
                value = step.value if isinstance(step, Right) else step
                step = gen.send(value)
        except StopIteration as e:
            return Right(e.value)

    return wrapper(func)  # type: ignore[return-value]


def do_try[**P, T](
    func: Callable[P, Generator[Try[Any], Any, T]],
) -> Callable[P, Try[T]]:
    """Decorator for generator-based do-notation with Try.

    The decorated function returns a lazy Try; the generator only starts
    when that Try is inspected. Each yielded Try is run and its value sent
    back; the first failure fails the whole computation with the same error.

    Args:
        func: A generator function that yields Trys and returns T.

    Returns:
        A function that returns Try[T].

    Example:
        ```python
        @do_try
        def load_config(path):
            text = yield read_file(path)
            data = yield parse(text)
            return data
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Generator[Try[Any], Any, T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Try[T]:
        def run_generator() -> T:
            gen = wrapped(*args, **kwargs)
            try:
                step = next(gen)
            except StopIteration as e:
                return e.value
            while True:
                sent = step
                if isinstance(step, Try):
                    outcome = step.run()
                    if isinstance(outcome, Failure):
                        gen.close()
                        raise outcome.error
                    sent = outcome.value
                try:
                    step = gen.send(sent)
                except StopIteration as e:
                    return e.value

        return Try(run_generator)

    return wrapper(func)  # type: ignore[return-value]
