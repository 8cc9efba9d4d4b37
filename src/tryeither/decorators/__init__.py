"""Decorators: @trying, @do and @do_try."""

from tryeither.decorators.do import do, do_try
from tryeither.decorators.trying import trying

__all__ = [
    'do',
    'do_try',
    'trying',
]
