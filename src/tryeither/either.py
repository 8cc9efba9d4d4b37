"""Either type: Left[L] | Right[R] | Bottom.

Right is the success path and Left the alternative path. Bottom is an
explicit third state meaning "neither": it is what `BottomType()` builds and
what `filter`/`bifilter` leave behind when a predicate rejects the payload.
Bottom flows through every combinator without calling user functions and
only refuses the operations that need a payload: `match`, `unwrap` and the
`if_*_with` fallbacks.

Example:
    ```python
    from tryeither import Left, Right

    def check(x: int) -> Either[str, int]:
        return Right(x * 2) if x > 5 else Left('too small')

    Right(10).bind(check)   # Right(value=20)
    Right(3).bind(check)    # Left(value='too small')
    ```
"""

from __future__ import annotations

import functools
import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from tryeither._logging import get_logger
from tryeither.errors import BottomError, NullPayloadError, UnsupportedStateError

if TYPE_CHECKING:
    from tryeither.typeclass.numeric import Addition, Difference, Divisible, Product

__all__ = [
    'Bottom',
    'BottomType',
    'Either',
    'Left',
    'Right',
    'lefts',
    'match_all',
    'partition',
    'rights',
]

_log = get_logger(__name__)


class Left[L](msgspec.Struct, frozen=True, gc=False):
    """Left variant of Either, the alternative (usually error) path.

    Left short-circuits `map`, `bind` and the arithmetic operations: they
    return the same instance without calling the supplied function.

    Examples:
        >>> Left('boom').map(lambda x: x + 1)
        Left(value='boom')
        >>> Left('boom').if_left(0)
        0
    """

    value: L

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullPayloadError('Left')

    def is_left(self) -> TypeIs[Left[L]]:
        """Return True since this is Left."""
        return True

    def is_right(self) -> TypeIs[Right[object]]:
        """Return False since this is Left."""
        return False

    def is_bottom(self) -> TypeIs[BottomType]:
        """Return False since this is Left."""
        return False

    def map[U](self, _f: Callable[[Any], U]) -> Left[L]:
        """Return self unchanged since this is Left."""
        return self

    def map_left[M](self, f: Callable[[L], M]) -> Left[M]:
        """Apply a function to the Left value."""
        return Left(f(self.value))

    def bimap[U, M](self, right: Callable[[Any], U], left: Callable[[L], M]) -> Left[M]:  # noqa: ARG002
        """Map the Left value with `left`."""
        return Left(left(self.value))

    def bind[U](self, _f: Callable[[Any], Either[L, U]]) -> Left[L]:
        """Return self unchanged since this is Left."""
        return self

    def bibind[M, U](
        self,
        right: Callable[[Any], Either[M, U]],  # noqa: ARG002
        left: Callable[[L], Either[M, U]],
    ) -> Either[M, U]:
        """Bind the Left value with `left`."""
        return left(self.value)

    def filter(self, _pred: Callable[[Any], bool]) -> Left[L]:
        """Return self unchanged since this is Left."""
        return self

    def bifilter(self, right: Callable[[Any], bool], left: Callable[[L], bool]) -> Left[L] | BottomType:  # noqa: ARG002
        """Keep the Left if `left` accepts its value, else collapse to Bottom."""
        if left(self.value):
            return self
        _log.debug('either.filtered_to_bottom', side='left')
        return Bottom

    def fold[S](self, state: S, _folder: Callable[[S, Any], S]) -> S:
        """Return the initial state since there is no Right value."""
        return state

    def bifold[S](self, state: S, right: Callable[[S, Any], S], left: Callable[[S, L], S]) -> S:  # noqa: ARG002
        """Fold the Left value into `state` with `left`."""
        return left(state, self.value)

    def forall(self, _pred: Callable[[Any], bool]) -> bool:
        """Return True: a predicate holds vacuously when there is no Right value."""
        return True

    def biforall(self, right: Callable[[Any], bool], left: Callable[[L], bool]) -> bool:  # noqa: ARG002
        """Test the Left value with `left`."""
        return left(self.value)

    def exists(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False since there is no Right value."""
        return False

    def biexists(self, right: Callable[[Any], bool], left: Callable[[L], bool]) -> bool:  # noqa: ARG002
        """Test the Left value with `left`."""
        return left(self.value)

    def count(self) -> int:
        """Return 0, the number of Right values."""
        return 0

    def iter(self, _action: Callable[[Any], Any]) -> None:
        """Do nothing since there is no Right value."""

    def match[T](self, right: Callable[[Any], T], left: Callable[[L], T]) -> T:  # noqa: ARG002
        """Collapse to a plain value using the `left` handler."""
        return left(self.value)

    def if_left[R](self, value: R) -> R:
        """Return the fallback `value` since this is Left."""
        return value

    def if_left_with[R](self, f: Callable[[L], R]) -> R:
        """Compute the fallback from the Left value."""
        return f(self.value)

    def if_right(self, _value: L) -> L:
        """Return the Left value, ignoring the fallback."""
        return self.value

    def if_right_with(self, _f: Callable[[Any], L]) -> L:
        """Return the Left value, ignoring the fallback function."""
        return self.value

    def on_left(self, action: Callable[[L], Any]) -> None:
        """Call `action` with the Left value for its side effects."""
        action(self.value)

    def on_right(self, _action: Callable[[Any], Any]) -> None:
        """Do nothing since there is no Right value."""

    def unwrap(self) -> NoReturn:
        """Raise since there is no Right value.

        Raises:
            UnsupportedStateError: Always.
        """
        raise UnsupportedStateError(f'called unwrap() on Left({self.value!r})')

    def unwrap_left(self) -> L:
        """Return the Left value."""
        return self.value

    def apply(self, *_args: Either[L, Any], partial: bool = False) -> Left[L]:  # noqa: ARG002
        """Return self unchanged since there is no function to apply."""
        return self

    def action[U](self, _other: Either[L, U]) -> Left[L]:
        """Return self unchanged since this is Left."""
        return self

    def parmap(self, _f: Callable[..., Any]) -> Left[L]:
        """Return self unchanged since this is Left."""
        return self

    def add(self, _strategy: type[Addition[Any]], _other: Either[L, Any]) -> Left[L]:
        """Return self; the strategy is never invoked."""
        return self

    def difference(self, _strategy: type[Difference[Any]], _other: Either[L, Any]) -> Left[L]:
        """Return self; the strategy is never invoked."""
        return self

    def product(self, _strategy: type[Product[Any]], _other: Either[L, Any]) -> Left[L]:
        """Return self; the strategy is never invoked."""
        return self

    def divide(self, _strategy: type[Divisible[Any]], _other: Either[L, Any]) -> Left[L]:
        """Return self; the strategy is never invoked."""
        return self


class Right[R](msgspec.Struct, frozen=True, gc=False):
    """Right variant of Either, the success path.

    Examples:
        >>> Right(5).map(lambda x: x * 2)
        Right(value=10)
        >>> Right(5).filter(lambda x: x > 10)
        Bottom
    """

    value: R

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullPayloadError('Right')

    def is_left(self) -> TypeIs[Left[object]]:
        """Return False since this is Right."""
        return False

    def is_right(self) -> TypeIs[Right[R]]:
        """Return True since this is Right."""
        return True

    def is_bottom(self) -> TypeIs[BottomType]:
        """Return False since this is Right."""
        return False

    def map[U](self, f: Callable[[R], U]) -> Right[U]:
        """Apply a function to the Right value.

        Args:
            f: Function to apply to the Right value.

        Returns:
            Right containing the result. A None result raises NullPayloadError.
        """
        return Right(f(self.value))

    def map_left[M](self, _f: Callable[[Any], M]) -> Right[R]:
        """Return self unchanged since this is Right."""
        return self

    def bimap[U, M](self, right: Callable[[R], U], left: Callable[[Any], M]) -> Right[U]:  # noqa: ARG002
        """Map the Right value with `right`."""
        return Right(right(self.value))

    def bind[L, U](self, f: Callable[[R], Either[L, U]]) -> Either[L, U]:
        """Apply a function returning an Either to the Right value.

        Also known as flatmap or and_then.

        Args:
            f: Function that takes R and returns Either[L, U].

        Returns:
            The Either returned by f.
        """
        return f(self.value)

    def bibind[M, U](
        self,
        right: Callable[[R], Either[M, U]],
        left: Callable[[Any], Either[M, U]],  # noqa: ARG002
    ) -> Either[M, U]:
        """Bind the Right value with `right`."""
        return right(self.value)

    def filter(self, pred: Callable[[R], bool]) -> Right[R] | BottomType:
        """Keep the Right if `pred` accepts its value, else collapse to Bottom.

        The collapse is lossy: the rejected value is gone and the result is
        neither Left nor Right. Check `is_bottom()` before matching.
        """
        if pred(self.value):
            return self
        _log.debug('either.filtered_to_bottom', side='right')
        return Bottom

    def bifilter(self, right: Callable[[R], bool], left: Callable[[Any], bool]) -> Right[R] | BottomType:  # noqa: ARG002
        """Keep the Right if `right` accepts its value, else collapse to Bottom."""
        return self.filter(right)

    def fold[S](self, state: S, folder: Callable[[S, R], S]) -> S:
        """Fold the Right value into `state`."""
        return folder(state, self.value)

    def bifold[S](self, state: S, right: Callable[[S, R], S], left: Callable[[S, Any], S]) -> S:  # noqa: ARG002
        """Fold the Right value into `state` with `right`."""
        return right(state, self.value)

    def forall(self, pred: Callable[[R], bool]) -> bool:
        """Test the Right value."""
        return pred(self.value)

    def biforall(self, right: Callable[[R], bool], left: Callable[[Any], bool]) -> bool:  # noqa: ARG002
        """Test the Right value with `right`."""
        return right(self.value)

    def exists(self, pred: Callable[[R], bool]) -> bool:
        """Test the Right value."""
        return pred(self.value)

    def biexists(self, right: Callable[[R], bool], left: Callable[[Any], bool]) -> bool:  # noqa: ARG002
        """Test the Right value with `right`."""
        return right(self.value)

    def count(self) -> int:
        """Return 1, the number of Right values."""
        return 1

    def iter(self, action: Callable[[R], Any]) -> None:
        """Call `action` with the Right value for its side effects."""
        action(self.value)

    def match[T](self, right: Callable[[R], T], left: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Collapse to a plain value using the `right` handler."""
        return right(self.value)

    def if_left(self, _value: R) -> R:
        """Return the Right value, ignoring the fallback."""
        return self.value

    def if_left_with(self, _f: Callable[[Any], R]) -> R:
        """Return the Right value, ignoring the fallback function."""
        return self.value

    def if_right[L](self, value: L) -> L:
        """Return the fallback `value` since this is Right."""
        return value

    def if_right_with[L](self, f: Callable[[R], L]) -> L:
        """Compute the fallback from the Right value."""
        return f(self.value)

    def on_left(self, _action: Callable[[Any], Any]) -> None:
        """Do nothing since there is no Left value."""

    def on_right(self, action: Callable[[R], Any]) -> None:
        """Call `action` with the Right value for its side effects."""
        action(self.value)

    def unwrap(self) -> R:
        """Return the Right value."""
        return self.value

    def unwrap_left(self) -> NoReturn:
        """Raise since there is no Left value.

        Raises:
            UnsupportedStateError: Always.
        """
        raise UnsupportedStateError(f'called unwrap_left() on Right({self.value!r})')

    def apply[L](self, *args: Either[L, Any], partial: bool = False) -> Either[L, Any]:
        """Apply the wrapped function to the Right values of `args`.

        The first argument that is not Right is returned as-is.

        Args:
            *args: Either arguments, in positional order.
            partial: Return a `functools.partial` over the supplied values
                instead of calling the function.

        Example:
            ```python
            Right(operator.add).apply(Right(1), Right(2))               # Right(value=3)
            Right(operator.add).apply(Right(1), partial=True).unwrap()(2)  # 3
            ```
        """
        values: list[Any] = []
        for arg in args:
            if not isinstance(arg, Right):
                return arg
            values.append(arg.value)
        fn: Callable[..., Any] = self.value  # type: ignore[assignment]
        if partial:
            return Right(functools.partial(fn, *values))
        return Right(fn(*values))

    def action[L, U](self, other: Either[L, U]) -> Either[L, U]:
        """Discard this value and return `other`."""
        return other

    def parmap(self, f: Callable[..., Any]) -> Right[functools.partial[Any]]:
        """Partially apply `f` to the Right value."""
        return Right(functools.partial(f, self.value))

    def add[L](self, strategy: type[Addition[R]], other: Either[L, R]) -> Either[L, R]:
        """Add `other`'s Right value to this one using `strategy`."""
        return other.map(lambda b: strategy.add(self.value, b))

    def difference[L](self, strategy: type[Difference[R]], other: Either[L, R]) -> Either[L, R]:
        """Subtract `other`'s Right value from this one using `strategy`."""
        return other.map(lambda b: strategy.difference(self.value, b))

    def product[L](self, strategy: type[Product[R]], other: Either[L, R]) -> Either[L, R]:
        """Multiply this Right value by `other`'s using `strategy`."""
        return other.map(lambda b: strategy.product(self.value, b))

    def divide[L](self, strategy: type[Divisible[R]], other: Either[L, R]) -> Either[L, R]:
        """Divide this Right value by `other`'s using `strategy`."""
        return other.map(lambda b: strategy.divide(self.value, b))


class BottomType(msgspec.Struct, frozen=True, gc=False):
    """Bottom variant of Either: neither Left nor Right.

    Use the `Bottom` constant rather than instantiating directly; all
    instances compare equal. Bottom is absorbed by every combinator and
    raises BottomError from `match`, `unwrap`, `unwrap_left` and the `_with`
    fallbacks.

    Examples:
        >>> BottomType() == Bottom
        True
        >>> Bottom.map(lambda x: x + 1)
        Bottom
    """

    def __repr__(self) -> str:
        return 'Bottom'

    def is_left(self) -> TypeIs[Left[object]]:
        return False

    def is_right(self) -> TypeIs[Right[object]]:
        return False

    def is_bottom(self) -> TypeIs[BottomType]:
        return True

    def map(self, _f: Callable[[Any], Any]) -> BottomType:
        return self

    def map_left(self, _f: Callable[[Any], Any]) -> BottomType:
        return self

    def bimap(self, _right: Callable[[Any], Any], _left: Callable[[Any], Any]) -> BottomType:
        return self

    def bind(self, _f: Callable[[Any], Any]) -> BottomType:
        return self

    def bibind(self, _right: Callable[[Any], Any], _left: Callable[[Any], Any]) -> BottomType:
        return self

    def filter(self, _pred: Callable[[Any], bool]) -> BottomType:
        return self

    def bifilter(self, _right: Callable[[Any], bool], _left: Callable[[Any], bool]) -> BottomType:
        return self

    def fold[S](self, state: S, _folder: Callable[[S, Any], S]) -> S:
        return state

    def bifold[S](self, state: S, _right: Callable[[S, Any], S], _left: Callable[[S, Any], S]) -> S:
        return state

    def forall(self, _pred: Callable[[Any], bool]) -> bool:
        """Return True: any predicate holds vacuously for Bottom."""
        return True

    def biforall(self, _right: Callable[[Any], bool], _left: Callable[[Any], bool]) -> bool:
        """Return True: any predicate holds vacuously for Bottom."""
        return True

    def exists(self, _pred: Callable[[Any], bool]) -> bool:
        return False

    def biexists(self, _right: Callable[[Any], bool], _left: Callable[[Any], bool]) -> bool:
        return False

    def count(self) -> int:
        return 0

    def iter(self, _action: Callable[[Any], Any]) -> None:
        pass

    def match(self, right: Callable[[Any], Any], left: Callable[[Any], Any]) -> NoReturn:  # noqa: ARG002
        """Raise: no handler exists for Bottom.

        Raises:
            BottomError: Always.
        """
        _log.debug('either.match_on_bottom')
        raise BottomError('match')

    def if_left[R](self, value: R) -> R:
        return value

    def if_left_with(self, _f: Callable[[Any], Any]) -> NoReturn:
        """Raise: there is no Left value to compute a fallback from.

        Raises:
            BottomError: Always.
        """
        raise BottomError('if_left_with')

    def if_right[L](self, value: L) -> L:
        return value

    def if_right_with(self, _f: Callable[[Any], Any]) -> NoReturn:
        raise BottomError('if_right_with')

    def on_left(self, _action: Callable[[Any], Any]) -> None:
        pass

    def on_right(self, _action: Callable[[Any], Any]) -> None:
        pass

    def unwrap(self) -> NoReturn:
        raise BottomError('unwrap')

    def unwrap_left(self) -> NoReturn:
        raise BottomError('unwrap_left')

    def apply(self, *_args: Any, partial: bool = False) -> BottomType:  # noqa: ARG002
        return self

    def action(self, _other: Any) -> BottomType:
        return self

    def parmap(self, _f: Callable[..., Any]) -> BottomType:
        return self

    def add(self, _strategy: Any, _other: Any) -> BottomType:
        return self

    def difference(self, _strategy: Any, _other: Any) -> BottomType:
        return self

    def product(self, _strategy: Any, _other: Any) -> BottomType:
        return self

    def divide(self, _strategy: Any, _other: Any) -> BottomType:
        return self


Bottom: BottomType = BottomType()


type Either[L, R] = Left[L] | Right[R] | BottomType


def lefts[L, R](eithers: Iterable[Either[L, R]]) -> Iterator[L]:
    """Lazily yield the Left values, in order, skipping Right and Bottom.

    Examples:
        >>> list(lefts([Left(1), Right('a'), Left(2)]))
        [1, 2]
    """
    for either in eithers:
        if isinstance(either, Left):
            yield either.value


def rights[L, R](eithers: Iterable[Either[L, R]]) -> Iterator[R]:
    """Lazily yield the Right values, in order, skipping Left and Bottom."""
    for either in eithers:
        if isinstance(either, Right):
            yield either.value


def partition[L, R](eithers: Iterable[Either[L, R]]) -> tuple[Iterator[L], Iterator[R]]:
    """Split into lazy iterators of Left values and Right values.

    Works on one-shot iterables: the input is teed, not re-iterated.

    Examples:
        >>> ls, rs = partition([Left(1), Right('a'), Left(2), Right('b')])
        >>> list(ls), list(rs)
        ([1, 2], ['a', 'b'])
    """
    for_lefts, for_rights = itertools.tee(eithers)
    return lefts(for_lefts), rights(for_rights)


def match_all[L, R, T](
    eithers: Iterable[Either[L, R]],
    right: Callable[[R], T],
    left: Callable[[L], T],
) -> Iterator[T]:
    """Lazily match every Either, skipping Bottom instead of raising."""
    for either in eithers:
        if isinstance(either, Right):
            yield right(either.value)
        elif isinstance(either, Left):
            yield left(either.value)
