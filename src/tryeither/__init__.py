"""tryeither: Try and Either containers for Python 3.13+.

Lazy, memoizing `Try` computations and three-state `Either` unions
(Left / Right / Bottom), with strategy-driven arithmetic, decorators and a
free-function prelude.

Flat imports (preferred):
    from tryeither import Try, Left, Right, Bottom, TInt, trying, do

Submodule imports (for organization):
    from tryeither.try_ import Try, Success, Failure
    from tryeither.either import Left, Right, Bottom, partition
    from tryeither.typeclass import TInt, TLst, typeclass
    from tryeither import prelude as P
"""

from tryeither import prelude
from tryeither._config import Config, get_config, init
from tryeither._logging import configure_logging, get_logger

# Decorators
from tryeither.decorators import do, do_try, trying

# Either
from tryeither.either import (
    Bottom,
    BottomType,
    Either,
    Left,
    Right,
    lefts,
    match_all,
    partition,
    rights,
)

# Errors
from tryeither.errors import (
    BottomError,
    FilterRejectedError,
    NullPayloadError,
    TryEitherError,
    UnsupportedStateError,
)

# Try
from tryeither.try_ import Failure, Outcome, Success, Try, tryfun

# Typeclass
from tryeither.typeclass import (
    Addition,
    Difference,
    Divisible,
    NoInstanceError,
    Product,
    TFloat,
    TInt,
    TLst,
    TMap,
    TNum,
    TSet,
    TString,
    typeclass,
)

__all__ = [
    'Addition',
    'Bottom',
    'BottomError',
    'BottomType',
    'Config',
    'Difference',
    'Divisible',
    'Either',
    'Failure',
    'FilterRejectedError',
    'Left',
    'NoInstanceError',
    'NullPayloadError',
    'Outcome',
    'Product',
    'Right',
    'Success',
    'TFloat',
    'TInt',
    'TLst',
    'TMap',
    'TNum',
    'TSet',
    'TString',
    'Try',
    'TryEitherError',
    'UnsupportedStateError',
    'configure_logging',
    'do',
    'do_try',
    'get_config',
    'get_logger',
    'init',
    'lefts',
    'match_all',
    'partition',
    'prelude',
    'rights',
    'tryfun',
    'trying',
    'typeclass',
]
