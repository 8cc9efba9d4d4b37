"""Free-function combinators over Try and Either.

Every function forwards to the method of the same concept on its first
argument, so one function covers both containers wherever the concept
exists for both:

    from tryeither import prelude as P

    P.map(Right(5), lambda x: x + 1)        # Right(value=6)
    P.map(Try.success(5), lambda x: x + 1)  # Try.success(6)
    P.add(TInt, Right(2), Right(3))         # Right(value=5)

Several names shadow builtins (`map`, `filter`, `iter`), so import the
module rather than its members.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from tryeither.either import Bottom, Left, Right, lefts, match_all, partition, rights
from tryeither.try_ import Try, tryfun

if TYPE_CHECKING:
    from tryeither.either import Either
    from tryeither.typeclass.numeric import Addition, Difference, Divisible, Product

__all__ = [
    'Bottom',
    'Left',
    'Right',
    'Try',
    'action',
    'add',
    'apply',
    'bifilter',
    'bifold',
    'biexists',
    'biforall',
    'bibind',
    'bimap',
    'bind',
    'count',
    'difference',
    'divide',
    'exists',
    'failed',
    'filter',
    'flatten',
    'fold',
    'forall',
    'if_fail',
    'if_fail_with',
    'if_left',
    'if_left_with',
    'if_right',
    'if_right_with',
    'if_succ',
    'is_bottom',
    'is_fail',
    'is_left',
    'is_right',
    'is_succ',
    'iter',
    'lefts',
    'map',
    'map_left',
    'match',
    'match_all',
    'on_left',
    'on_right',
    'parmap',
    'partition',
    'product',
    'rights',
    'tryfun',
]

type Monadic = Try[Any] | Either[Any, Any]


# --- Arithmetic ---


def add(strategy: type[Addition[Any]], lhs: Monadic, rhs: Monadic) -> Monadic:
    """Add the bound values of `lhs` and `rhs` with `strategy`.

    If either side is a Left/Bottom/failure the result is the first such
    side, and the strategy is not invoked.
    """
    return lhs.add(strategy, rhs)


def difference(strategy: type[Difference[Any]], lhs: Monadic, rhs: Monadic) -> Monadic:
    """Subtract `rhs` from `lhs` with `strategy`.

    For numbers this subtracts; `TLst`, `TSet` and `TMap` remove the
    right-hand items or keys instead.
    """
    return lhs.difference(strategy, rhs)


def product(strategy: type[Product[Any]], lhs: Monadic, rhs: Monadic) -> Monadic:
    """Multiply the bound values with `strategy`."""
    return lhs.product(strategy, rhs)


def divide(strategy: type[Divisible[Any]], lhs: Monadic, rhs: Monadic) -> Monadic:
    """Divide `lhs` by `rhs` with `strategy`."""
    return lhs.divide(strategy, rhs)


# --- Applicative ---


def apply(fn: Monadic, *args: Monadic, partial: bool = False) -> Monadic:
    """Apply a wrapped function to wrapped arguments."""
    return fn.apply(*args, partial=partial)


def action(first: Either[Any, Any], second: Either[Any, Any]) -> Either[Any, Any]:
    """Sequence two Eithers, keeping the second unless the first short-circuits."""
    return first.action(second)


def parmap(ma: Monadic, f: Callable[..., Any]) -> Monadic:
    """Partially apply `f` to the bound value."""
    return ma.parmap(f)


# --- Functor / monad ---


def map(ma: Monadic, f: Callable[[Any], Any]) -> Monadic:  # noqa: A001
    return ma.map(f)


def map_left(ma: Either[Any, Any], f: Callable[[Any], Any]) -> Either[Any, Any]:
    return ma.map_left(f)


def bimap(ma: Monadic, right: Callable[[Any], Any], left: Callable[[Any], Any]) -> Monadic:
    """Map the success side with `right` or the alternative side with `left`.

    For a Try, `left` receives the captured exception.
    """
    return ma.bimap(right, left)


def bind(ma: Monadic, f: Callable[[Any], Any]) -> Monadic:
    return ma.bind(f)


def bibind(ma: Monadic, right: Callable[[Any], Any], left: Callable[[Any], Any]) -> Monadic:
    return ma.bibind(right, left)


def filter(ma: Monadic, pred: Callable[[Any], bool]) -> Monadic:  # noqa: A001
    """Filter the bound value.

    A rejected Right becomes Bottom; a rejected Try value becomes a
    FilterRejectedError failure.
    """
    return ma.filter(pred)


def bifilter(ma: Monadic, right: Callable[[Any], bool], left: Callable[[Any], bool]) -> Monadic:
    return ma.bifilter(right, left)


def flatten(ma: Try[Any]) -> Try[Any]:
    """Collapse nested Trys to any depth."""
    return ma.flatten()


def failed(ma: Try[Any]) -> Try[Exception]:
    """Expose a Try's captured exception as its bound value."""
    return ma.failed()


# --- Folding and queries ---


def fold[S](ma: Monadic, state: S, folder: Callable[[S, Any], S]) -> S:
    return ma.fold(state, folder)


def bifold[S](ma: Monadic, state: S, right: Callable[[S, Any], S], left: Callable[[S, Any], S]) -> S:
    return ma.bifold(state, right, left)


def forall(ma: Monadic, pred: Callable[[Any], bool]) -> bool:
    return ma.forall(pred)


def biforall(ma: Either[Any, Any], right: Callable[[Any], bool], left: Callable[[Any], bool]) -> bool:
    return ma.biforall(right, left)


def exists(ma: Monadic, pred: Callable[[Any], bool]) -> bool:
    return ma.exists(pred)


def biexists(ma: Either[Any, Any], right: Callable[[Any], bool], left: Callable[[Any], bool]) -> bool:
    return ma.biexists(right, left)


def count(ma: Monadic) -> int:
    """Return 1 when there is a bound value, 0 otherwise."""
    return ma.count()


def iter(ma: Monadic, action: Callable[[Any], Any]) -> None:  # noqa: A001
    """Invoke `action` with the bound value, if there is one."""
    ma.iter(action)


def match(ma: Monadic, right: Callable[[Any], Any], left: Callable[[Any], Any] | Any) -> Any:
    """Collapse to a plain value.

    For a Try, `left` may also be a plain fallback value.

    Raises:
        BottomError: When `ma` is Bottom.
    """
    return ma.match(right, left)


# --- Try ---


def is_succ(ma: Try[Any]) -> bool:
    return ma.is_succ()


def is_fail(ma: Try[Any]) -> bool:
    return ma.is_fail()


def if_succ(ma: Try[Any], action: Callable[[Any], Any]) -> None:
    ma.if_succ(action)


def if_fail[T](ma: Try[T], value: T) -> T:
    return ma.if_fail(value)


def if_fail_with[T](ma: Try[T], f: Callable[[], T]) -> T:
    return ma.if_fail_with(f)


# --- Either ---


def is_left(ma: Either[Any, Any]) -> bool:
    return ma.is_left()


def is_right(ma: Either[Any, Any]) -> bool:
    return ma.is_right()


def is_bottom(ma: Either[Any, Any]) -> bool:
    return ma.is_bottom()


def if_left[R](ma: Either[Any, R], value: R) -> R:
    """Return the Right value, or `value` otherwise."""
    return ma.if_left(value)


def if_left_with[L, R](ma: Either[L, R], f: Callable[[L], R]) -> R:
    """Return the Right value, or compute one from the Left value.

    Raises:
        BottomError: When `ma` is Bottom.
    """
    return ma.if_left_with(f)


def if_right[L](ma: Either[L, Any], value: L) -> L:
    """Return the Left value, or `value` otherwise."""
    return ma.if_right(value)


def if_right_with[L, R](ma: Either[L, R], f: Callable[[R], L]) -> L:
    return ma.if_right_with(f)


def on_left[L](ma: Either[L, Any], action: Callable[[L], Any]) -> None:
    """Invoke `action` with the Left value, if there is one."""
    ma.on_left(action)


def on_right[R](ma: Either[Any, R], action: Callable[[R], Any]) -> None:
    ma.on_right(action)

