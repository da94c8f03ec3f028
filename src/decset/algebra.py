'''
Set algebra on boundary sequences.

Complement, union and intersection are linear sweeps over the ascending boundary sequences of
their operands. Union and intersection scan both operands simultaneously, each with its own
:class:`~decset.boundaries.Cursor`. At every coordinate that carries a boundary in one or both
operands, the membership of each operand left of, at and right of the coordinate is combined
pointwise (``or`` for the union, ``and`` for the intersection), and the canonical boundary
reproducing the combined membership is emitted. Membership can only change at boundary
coordinates, so no information is lost by sampling there.
'''
import operator
from typing import Callable, Sequence, Tuple

from dnutils import getlogger, logs

from .base.constants import EXC, NINF, PINF
from .base.decimals import compare, isninf, ispinf
from .boundaries import (
    Boundary,
    Cursor,
    LOWER,
    POINT,
    lower,
    upper,
    membership,
    idle,
    boundary_at
)


logger = getlogger('/decset/algebra', level=logs.INFO)


# ----------------------------------------------------------------------------------------------------------------------

def complement(boundaries: Sequence[Boundary]) -> Tuple[Boundary, ...]:
    '''
    Complement of a boundary sequence with respect to the extended real line.

    Lower and upper bounds swap their roles and their closedness, points stay as they are.
    Values left of the first and right of the last boundary change from out-of-set to in-set,
    so the result extends to negative and positive infinity, unless the operand already
    reaches the respective infinity.
    '''
    result = []
    n = len(boundaries)
    if not n:
        result = [lower(NINF, EXC), upper(PINF, EXC)]

    for i, b in enumerate(boundaries):
        first = i == 0
        last = i == n - 1
        if b.kind == POINT:
            if first:
                result.append(lower(NINF, EXC))
            result.append(b)
            if last:
                result.append(upper(PINF, EXC))
        elif b.kind == LOWER:
            if first:
                if isninf(b.value):
                    continue
                result.append(lower(NINF, EXC))
            result.append(upper(b.value, not b.open))
        else:
            if last and ispinf(b.value):
                continue
            result.append(lower(b.value, not b.open))
            if last:
                result.append(upper(PINF, EXC))

    logger.debug('complement: %d -> %d boundaries' % (n, len(result)))
    return tuple(result)


# ----------------------------------------------------------------------------------------------------------------------

def _sweep(
        a: Sequence[Boundary],
        b: Sequence[Boundary],
        op: Callable[[bool, bool], bool],
        flush: bool
) -> Tuple[Boundary, ...]:
    result = []
    ai = bi = 0
    a_cursor = b_cursor = Cursor.OUTSIDE

    while ai < len(a) and bi < len(b):
        av, bv = a[ai], b[bi]
        c = compare(av.value, bv.value)
        value = av.value if c <= 0 else bv.value

        if c <= 0:
            a_membership = membership(av, a_cursor)
            a_cursor = a_cursor.advance(av)
            ai += 1
        else:
            a_membership = idle(a_cursor)

        if c >= 0:
            b_membership = membership(bv, b_cursor)
            b_cursor = b_cursor.advance(bv)
            bi += 1
        else:
            b_membership = idle(b_cursor)

        combined = boundary_at(value, *map(op, a_membership, b_membership))
        if combined is not None:
            result.append(combined)

    if flush:
        result.extend(a[ai:])
        result.extend(b[bi:])
    return tuple(result)


def union(a: Sequence[Boundary], b: Sequence[Boundary]) -> Tuple[Boundary, ...]:
    '''
    Union of two boundary sequences.

    A boundary of one operand survives where the other operand is out-of-set. At coinciding
    coordinates a value is included if either operand includes it. Once one operand is
    exhausted, the remaining boundaries of the other one are taken over as they are.
    '''
    result = _sweep(a, b, operator.or_, flush=True)
    logger.debug('union: %d | %d -> %d boundaries' % (len(a), len(b), len(result)))
    return result


def intersection(a: Sequence[Boundary], b: Sequence[Boundary]) -> Tuple[Boundary, ...]:
    '''
    Intersection of two boundary sequences.

    A boundary of one operand survives only where the other operand is in-set. At coinciding
    coordinates a value is included only if both operands include it. Once one operand is
    exhausted, nothing is left in common.
    '''
    result = _sweep(a, b, operator.and_, flush=False)
    logger.debug('intersection: %d & %d -> %d boundaries' % (len(a), len(b), len(result)))
    return result
