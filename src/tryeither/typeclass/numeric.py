"""Numeric capability protocols and the strategies that implement them.

A strategy is a stateless class whose static methods combine two values of
the same type. Callers pick the strategy at the call site and hand it to the
container, which only invokes it after both operands unwrapped successfully:

    Right(2).add(TInt, Right(3))            # Right(value=5)
    Try.success([1, 2]).add(TLst, Try.success([3]))

Different value categories carry different meanings. For numbers
`difference` subtracts, for sequences it removes the right-hand items, for
maps it removes the right-hand keys.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from tryeither.typeclass.core import typeclass

__all__ = [
    'Addition',
    'Difference',
    'Divisible',
    'Product',
    'TFloat',
    'TInt',
    'TLst',
    'TMap',
    'TNum',
    'TSet',
    'TString',
]


@runtime_checkable
class Addition[A](Protocol):
    """Capability to add (append) two values."""

    @staticmethod
    def add(x: A, y: A) -> A: ...


@runtime_checkable
class Difference[A](Protocol):
    """Capability to find the difference between two values."""

    @staticmethod
    def difference(x: A, y: A) -> A: ...


@runtime_checkable
class Product[A](Protocol):
    """Capability to find the product of two values."""

    @staticmethod
    def product(x: A, y: A) -> A: ...


@runtime_checkable
class Divisible[A](Protocol):
    """Capability to divide one value by another."""

    @staticmethod
    def divide(x: A, y: A) -> A: ...


def _truncating_div(x: int, y: int) -> int:
    # Rounds toward zero; ZeroDivisionError propagates from //.
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


@typeclass
def _num_divide(x: Any, y: Any) -> Any:
    return x / y


@_num_divide.instance(int)
def _num_divide_int(x: int, y: int) -> int:
    return _truncating_div(x, y)


class TInt:
    """Integer arithmetic. Division truncates toward zero."""

    @staticmethod
    def add(x: int, y: int) -> int:
        return x + y

    @staticmethod
    def difference(x: int, y: int) -> int:
        return x - y

    @staticmethod
    def product(x: int, y: int) -> int:
        return x * y

    @staticmethod
    def divide(x: int, y: int) -> int:
        return _truncating_div(x, y)


class TFloat:
    """Floating point arithmetic with true division."""

    @staticmethod
    def add(x: float, y: float) -> float:
        return x + y

    @staticmethod
    def difference(x: float, y: float) -> float:
        return x - y

    @staticmethod
    def product(x: float, y: float) -> float:
        return x * y

    @staticmethod
    def divide(x: float, y: float) -> float:
        return x / y


class TNum:
    """Arithmetic for any number type.

    `divide` dispatches on the left operand: integers (and bools) truncate
    toward zero like `TInt`, every other number uses true division, so
    Decimal and Fraction keep their exactness.
    """

    add = staticmethod(operator.add)
    difference = staticmethod(operator.sub)
    product = staticmethod(operator.mul)

    @staticmethod
    def divide(x: Any, y: Any) -> Any:
        return _num_divide(x, y)


class TString:
    """String concatenation."""

    @staticmethod
    def add(x: str, y: str) -> str:
        return x + y


class TLst:
    """Sequences, always producing lists.

    - add: concatenation.
    - difference: items of `x` not present in `y`, order kept.
    - product: products of every pair (a, b) with a from `x` and b from `y`.
    - divide: quotients of every such pair.
    """

    @staticmethod
    def add(x: Iterable[Any], y: Iterable[Any]) -> list[Any]:
        return [*x, *y]

    @staticmethod
    def difference(x: Iterable[Any], y: Iterable[Any]) -> list[Any]:
        removed = list(y)
        return [item for item in x if item not in removed]

    @staticmethod
    def product(x: Iterable[Any], y: Iterable[Any]) -> list[Any]:
        right = list(y)
        return [a * b for a in x for b in right]

    @staticmethod
    def divide(x: Iterable[Any], y: Iterable[Any]) -> list[Any]:
        right = list(y)
        return [a / b for a in x for b in right]


class TSet:
    """Sets: union and difference."""

    @staticmethod
    def add(x: frozenset[Any] | set[Any], y: frozenset[Any] | set[Any]) -> frozenset[Any] | set[Any]:
        return x | y

    @staticmethod
    def difference(x: frozenset[Any] | set[Any], y: frozenset[Any] | set[Any]) -> frozenset[Any] | set[Any]:
        return x - y


class TMap:
    """Mappings: merge (right-hand side wins) and key removal."""

    @staticmethod
    def add(x: Mapping[Any, Any], y: Mapping[Any, Any]) -> dict[Any, Any]:
        return {**x, **y}

    @staticmethod
    def difference(x: Mapping[Any, Any], y: Mapping[Any, Any]) -> dict[Any, Any]:
        return {k: v for k, v in x.items() if k not in y}
