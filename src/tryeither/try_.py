"""Try type: a deferred computation that may fail.

A Try wraps a zero-argument callable. Nothing runs until something needs the
outcome (`run`, `is_succ`, `match`, `fold`, ...). The outcome is either
`Success(value)` or `Failure(error)`, where `error` is the exact exception
object the computation raised.

Combinators never run anything themselves: `map`, `bind`, `filter` and
friends return new lazy Trys whose evaluation runs the source first. A user
function raising inside one of those steps turns that step's outcome into a
Failure with the new exception.

Outcomes are memoized by default: a Try runs its computation at most once,
and every later inspection reuses the stored outcome. Pass ``memoize=False``
(or configure it globally with `tryeither.init`) to re-run on every
inspection. There is no locking; two threads inspecting an unevaluated Try
at the same time may both run it.

Example:
    ```python
    from tryeither import Try

    parsed = Try(lambda: int(raw)).map(lambda n: n * 2)
    parsed.match(succ=str, fail=lambda e: f'bad input: {e}')
    ```
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeIs

import msgspec

from tryeither._config import get_config
from tryeither._logging import get_logger
from tryeither.errors import FilterRejectedError, UnsupportedStateError

if TYPE_CHECKING:
    from tryeither.typeclass.numeric import Addition, Difference, Divisible, Product

__all__ = ['Failure', 'Outcome', 'Success', 'Try', 'tryfun']

_log = get_logger(__name__)


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Outcome of a Try whose computation returned a value."""

    value: T

    def is_succ(self) -> TypeIs[Success[T]]:
        return True

    def is_fail(self) -> TypeIs[Failure]:
        return False


class Failure(msgspec.Struct, frozen=True, gc=False):
    """Outcome of a Try whose computation raised.

    Attributes:
        error: The exception object that was raised, unchanged.
    """

    error: Exception

    def is_succ(self) -> TypeIs[Success[Any]]:
        return False

    def is_fail(self) -> TypeIs[Failure]:
        return True


type Outcome[T] = Success[T] | Failure


class Try[T]:
    """A lazy, memoizing computation that produces T or captures a fault.

    Attributes:
        _evaluate: Produces the outcome; may raise, in which case the raised
            exception becomes the Failure.
        _memoize: Whether the first outcome is stored and reused.
        _outcome: The stored outcome, or None before the first run.
    """

    __slots__ = ('_evaluate', '_memoize', '_outcome')

    def __init__(self, thunk: Callable[[], T], *, memoize: bool | None = None) -> None:
        """Wrap `thunk` without running it.

        Args:
            thunk: Zero-argument callable producing the value.
            memoize: Store the outcome after the first run. Defaults to the
                configured value (on, unless turned off with `init`).
        """

        def evaluate() -> Outcome[T]:
            return Success(thunk())

        self._evaluate: Callable[[], Outcome[T]] = evaluate
        self._memoize: bool = get_config().memoize if memoize is None else memoize
        self._outcome: Outcome[T] | None = None

    @classmethod
    def _lift(cls, evaluate: Callable[[], Outcome[Any]], memoize: bool) -> Try[Any]:
        t = cls.__new__(cls)
        t._evaluate = evaluate
        t._memoize = memoize
        t._outcome = None
        return t

    @classmethod
    def success(cls, value: T) -> Try[T]:
        """Create an already-evaluated successful Try."""
        t = cls._lift(lambda: Success(value), get_config().memoize)
        t._outcome = Success(value)
        return t

    @classmethod
    def failure(cls, error: Exception) -> Try[Any]:
        """Create an already-evaluated failed Try holding `error`."""
        t = cls._lift(lambda: Failure(error), get_config().memoize)
        t._outcome = Failure(error)
        return t

    def _derive(self, evaluate: Callable[[], Outcome[Any]]) -> Try[Any]:
        return Try._lift(evaluate, self._memoize)

    def run(self) -> Outcome[T]:
        """Evaluate the computation, or return the memoized outcome.

        Returns:
            Success(value) or Failure(error). Never raises for an `Exception`;
            `BaseException`s such as KeyboardInterrupt propagate.
        """
        if self._outcome is not None:
            return self._outcome

        try:
            outcome = self._evaluate()
        except Exception as e:
            _log.debug('try.fault_captured', error_type=type(e).__name__, error=str(e))
            outcome = Failure(e)

        if self._memoize:
            self._outcome = outcome
            # Release the upstream chain; only the outcome is needed now.
            self._evaluate = lambda: outcome
        return outcome

    @property
    def memoized(self) -> bool:
        """Whether this Try stores its outcome after the first run."""
        return self._memoize

    def is_succ(self) -> bool:
        """Return True if the computation succeeds."""
        return isinstance(self.run(), Success)

    def is_fail(self) -> bool:
        """Return True if the computation fails."""
        return isinstance(self.run(), Failure)

    def map[U](self, f: Callable[[T], U]) -> Try[U]:
        """Map the bound value.

        A failure propagates without calling `f`. If `f` raises, the mapped
        Try fails with that exception.
        """

        def evaluate() -> Outcome[U]:
            outcome = self.run()
            if isinstance(outcome, Failure):
                return outcome
            return Success(f(outcome.value))

        return self._derive(evaluate)

    def bimap[U](self, succ: Callable[[T], U], fail: Callable[[Exception], U]) -> Try[U]:
        """Map a success with `succ` or a failure with `fail`.

        The result succeeds unless the chosen function raises.
        """

        def evaluate() -> Outcome[U]:
            outcome = self.run()
            if isinstance(outcome, Failure):
                return Success(fail(outcome.error))
            return Success(succ(outcome.value))

        return self._derive(evaluate)

    def bind[U](self, f: Callable[[T], Try[U]]) -> Try[U]:
        """Chain a computation that returns a Try.

        Also known as flatmap or and_then.
        """

        def evaluate() -> Outcome[U]:
            outcome = self.run()
            if isinstance(outcome, Failure):
                return outcome
            return f(outcome.value).run()

        return self._derive(evaluate)

    def bibind[U](self, succ: Callable[[T], Try[U]], fail: Callable[[Exception], Try[U]]) -> Try[U]:
        """Bind a success with `succ` or a failure with `fail`."""

        def evaluate() -> Outcome[U]:
            outcome = self.run()
            if isinstance(outcome, Failure):
                return fail(outcome.error).run()
            return succ(outcome.value).run()

        return self._derive(evaluate)

    def filter(self, pred: Callable[[T], bool]) -> Try[T]:
        """Fail with FilterRejectedError when the bound value fails `pred`."""

        def evaluate() -> Outcome[T]:
            outcome = self.run()
            if isinstance(outcome, Success) and not pred(outcome.value):
                return Failure(FilterRejectedError(outcome.value))
            return outcome

        return self._derive(evaluate)

    def bifilter(self, succ: Callable[[T], bool], fail: Callable[[Exception], bool]) -> Try[T]:
        """Filter a success with `succ` and a failure with `fail`.

        A rejected success or a rejected failure becomes a FilterRejectedError
        failure; an accepted failure keeps its original error.
        """

        def evaluate() -> Outcome[T]:
            outcome = self.run()
            if isinstance(outcome, Failure):
                return outcome if fail(outcome.error) else Failure(FilterRejectedError(outcome.error))
            return outcome if succ(outcome.value) else Failure(FilterRejectedError(outcome.value))

        return self._derive(evaluate)

    def fold[S](self, state: S, folder: Callable[[S, T], S]) -> S:
        """Fold the bound value into `state`; a failure returns `state`."""
        outcome = self.run()
        if isinstance(outcome, Failure):
            return state
        return folder(state, outcome.value)

    def bifold[S](self, state: S, succ: Callable[[S, T], S], fail: Callable[[S, Exception], S]) -> S:
        """Fold a success with `succ` or a failure with `fail`."""
        outcome = self.run()
        if isinstance(outcome, Failure):
            return fail(state, outcome.error)
        return succ(state, outcome.value)

    def forall(self, pred: Callable[[T], bool]) -> bool:
        """True if the bound value satisfies `pred`, or if the Try fails."""
        outcome = self.run()
        return isinstance(outcome, Failure) or pred(outcome.value)

    def exists(self, pred: Callable[[T], bool]) -> bool:
        """True if the Try succeeds and its value satisfies `pred`."""
        outcome = self.run()
        return isinstance(outcome, Success) and pred(outcome.value)

    def count(self) -> int:
        """Return 1 if the Try succeeds, 0 otherwise."""
        return 1 if isinstance(self.run(), Success) else 0

    def iter(self, action: Callable[[T], Any]) -> None:
        """Call `action` with the bound value if the Try succeeds."""
        outcome = self.run()
        if isinstance(outcome, Success):
            action(outcome.value)

    def if_succ(self, action: Callable[[T], Any]) -> None:
        """Invoke `action` if the Try returns a value successfully."""
        self.iter(action)

    def if_fail(self, value: T) -> T:
        """Return the bound value, or `value` if the Try fails."""
        outcome = self.run()
        if isinstance(outcome, Failure):
            return value
        return outcome.value

    def if_fail_with(self, f: Callable[[], T]) -> T:
        """Return the bound value, or compute a fallback with `f` if the Try fails."""
        outcome = self.run()
        if isinstance(outcome, Failure):
            return f()
        return outcome.value

    def match[U](self, succ: Callable[[T], U], fail: Callable[[Exception], U] | U) -> U:
        """Collapse both states into a plain value.

        Args:
            succ: Maps the bound value.
            fail: Maps the captured exception, or a plain fallback value.
                Any callable is treated as a handler and called with the error.
        """
        outcome = self.run()
        if isinstance(outcome, Failure):
            return fail(outcome.error) if callable(fail) else fail
        return succ(outcome.value)

    def unwrap(self) -> T:
        """Return the bound value or re-raise the captured exception."""
        outcome = self.run()
        if isinstance(outcome, Failure):
            raise outcome.error
        return outcome.value

    def failed(self) -> Try[Exception]:
        """Turn the captured exception into the bound value.

        A successful source has no exception to expose and fails with
        UnsupportedStateError instead.
        """

        def evaluate() -> Outcome[Exception]:
            outcome = self.run()
            if isinstance(outcome, Failure):
                return Success(outcome.error)
            return Failure(UnsupportedStateError('failed() called on a successful Try'))

        return self._derive(evaluate)

    def flatten(self) -> Try[Any]:
        """Collapse nested Trys, to any depth, into one."""

        def evaluate() -> Outcome[Any]:
            outcome: Outcome[Any] = self.run()
            while isinstance(outcome, Success) and isinstance(outcome.value, Try):
                outcome = outcome.value.run()
            return outcome

        return self._derive(evaluate)

    def apply(self, *args: Try[Any], partial: bool = False) -> Try[Any]:
        """Apply the bound function to the bound values of `args`.

        The function Try runs first, then each argument left to right; the
        first failure wins.

        Args:
            *args: Try arguments, in positional order.
            partial: Bind the supplied values with `functools.partial`
                instead of calling the function.
        """

        def evaluate() -> Outcome[Any]:
            outcome = self.run()
            if isinstance(outcome, Failure):
                return outcome
            values: list[Any] = []
            for arg in args:
                arg_outcome = arg.run()
                if isinstance(arg_outcome, Failure):
                    return arg_outcome
                values.append(arg_outcome.value)
            fn: Callable[..., Any] = outcome.value  # type: ignore[assignment]
            if partial:
                return Success(functools.partial(fn, *values))
            return Success(fn(*values))

        return self._derive(evaluate)

    def parmap(self, f: Callable[..., Any]) -> Try[functools.partial[Any]]:
        """Partially apply `f` to the bound value."""
        return self.map(lambda value: functools.partial(f, value))

    def _combine(self, other: Try[T], op: Callable[[T, T], T]) -> Try[T]:
        def evaluate() -> Outcome[T]:
            lhs = self.run()
            if isinstance(lhs, Failure):
                return lhs
            rhs = other.run()
            if isinstance(rhs, Failure):
                return rhs
            return Success(op(lhs.value, rhs.value))

        return self._derive(evaluate)

    def add(self, strategy: type[Addition[T]], other: Try[T]) -> Try[T]:
        """Add the bound values with `strategy`; either failure fails the result."""
        return self._combine(other, strategy.add)

    def difference(self, strategy: type[Difference[T]], other: Try[T]) -> Try[T]:
        """Subtract `other`'s bound value with `strategy`."""
        return self._combine(other, strategy.difference)

    def product(self, strategy: type[Product[T]], other: Try[T]) -> Try[T]:
        """Multiply the bound values with `strategy`."""
        return self._combine(other, strategy.product)

    def divide(self, strategy: type[Divisible[T]], other: Try[T]) -> Try[T]:
        """Divide by `other`'s bound value with `strategy`."""
        return self._combine(other, strategy.divide)

    def __repr__(self) -> str:
        if self._outcome is None:
            return 'Try(<pending>)'
        if isinstance(self._outcome, Failure):
            return f'Try.failure({self._outcome.error!r})'
        return f'Try.success({self._outcome.value!r})'

    def __eq__(self, other: object) -> bool:
        """Compare outcomes. Both sides are evaluated."""
        if not isinstance(other, Try):
            return NotImplemented
        return self.run() == other.run()

    __hash__ = None  # type: ignore[assignment]


def tryfun[T](f: Callable[[], Try[T]]) -> Try[T]:
    """Build a Try from a function that itself returns a Try.

    Exceptions raised by `f` while producing the inner Try are captured too.
    """
    return Try(lambda: f().unwrap())
