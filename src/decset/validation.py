from typing import Iterable

from .base.decimals import compare, fmt_decimal, isinf
from .base.errors import (
    ValidationError,
    UnsortedOrDuplicate,
    InfiniteMustBeOpen,
    LowerWhileInside,
    UpperWhileOutside,
    PointMustBeClosed,
    UnterminatedTrailingInterval
)
from .boundaries import Boundary, Cursor, LOWER, UPPER, POINT


# ----------------------------------------------------------------------------------------------------------------------

def validate(boundaries: Iterable[Boundary]) -> None:
    '''
    Check that ``boundaries`` is a well-formed, canonically sorted boundary sequence.

    The sequence must be strictly ascending in value, infinite values must only occur at open
    boundaries, lower and upper bounds must alternate such that every interval that is opened
    is closed again, and points must not be flagged open.

    :param boundaries:  the boundary sequence, e.g. a :class:`decset.DecimalSet`
    :raises ValidationError: the subclass naming the first violation found
    '''
    cursor = Cursor.OUTSIDE
    prev = None
    for i, b in enumerate(boundaries):
        if prev is not None and compare(prev.value, b.value) >= 0:
            raise UnsortedOrDuplicate(
                '%s/%s is not greater than %s' % (i, fmt_decimal(b.value), fmt_decimal(prev.value)),
                index=i
            )
        if isinf(b.value) and not b.open:
            raise InfiniteMustBeOpen(
                '%s/%s is infinite, so cannot be closed' % (i, fmt_decimal(b.value)),
                index=i
            )
        if b.kind == LOWER and cursor.inside:
            raise LowerWhileInside(
                '%s/%s is a lower bound on an interval, '
                'but values below the bound are in-set as well' % (i, fmt_decimal(b.value)),
                index=i
            )
        if b.kind == UPPER and not cursor.inside:
            raise UpperWhileOutside(
                '%s/%s is an upper bound on an interval, '
                'but values below the bound are out-of-set as well' % (i, fmt_decimal(b.value)),
                index=i
            )
        if b.kind == POINT and b.open:
            raise PointMustBeClosed(
                '%s/%s is an exclusion or inclusion, so cannot be open' % (i, fmt_decimal(b.value)),
                index=i
            )
        cursor = cursor.advance(b)
        prev = b

    if cursor.inside:
        raise UnterminatedTrailingInterval('Last interval is not bounded.')


def isvalid(boundaries: Iterable[Boundary]) -> bool:
    try:
        validate(boundaries)
    except ValidationError:
        return False
    return True
