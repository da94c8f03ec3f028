'''This page contains auto-generated API reference documentation for the decset package'''

from .version import __version__

from .base.constants import INC, EXC, NINF, PINF
from .base.errors import (
    ParseError,
    ValidationError,
    UnsortedOrDuplicate,
    InfiniteMustBeOpen,
    LowerWhileInside,
    UpperWhileOutside,
    PointMustBeClosed,
    UnterminatedTrailingInterval
)
from .boundaries import Boundary, Cursor, LOWER, UPPER, POINT
from .validation import validate, isvalid
from .rendering import render
from .sets import (
    DecimalSet,
    EMPTY,
    R,
    new,
    new_from_strings,
    complement,
    union,
    intersection
)
