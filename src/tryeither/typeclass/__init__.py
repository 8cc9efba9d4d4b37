"""Typeclass dispatch and the numeric strategies built on it."""

from tryeither.typeclass.core import NoInstanceError, TypeClass, typeclass
from tryeither.typeclass.numeric import (
    Addition,
    Difference,
    Divisible,
    Product,
    TFloat,
    TInt,
    TLst,
    TMap,
    TNum,
    TSet,
    TString,
)

__all__ = [
    'Addition',
    'Difference',
    'Divisible',
    'NoInstanceError',
    'Product',
    'TFloat',
    'TInt',
    'TLst',
    'TMap',
    'TNum',
    'TSet',
    'TString',
    'TypeClass',
    'typeclass',
]
