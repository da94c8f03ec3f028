'''
The boundary model.

A set on the extended real line is represented by the ascending sequence of its boundaries.
Each :class:`Boundary` carries a value, a kind and an ``open`` flag:

  - ``LOWER`` starts an interval extending to the right,
  - ``UPPER`` ends an interval that started to the left,
  - ``POINT`` is a single discrete value which is excluded from the set if it lies
    inside an interval and included otherwise. A point is never open.

Scanning the sequence from left to right, the membership of the values passed so far is
tracked by a :class:`Cursor`.
'''
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from .base.constants import INC
from .base.decimals import fmt_decimal


LOWER = 1
UPPER = 2
POINT = 3

KIND_NAMES = {
    LOWER: 'LOWER',
    UPPER: 'UPPER',
    POINT: 'POINT',
}


# ----------------------------------------------------------------------------------------------------------------------

class Boundary:
    '''Immutable boundary event at a single value of the extended real line.'''

    __slots__ = ('_value', '_kind', '_open')

    def __init__(self, value: Decimal, kind: int, open: bool = INC):
        if kind not in KIND_NAMES:
            raise ValueError('Illegal boundary kind: %s' % kind)
        self._value = value
        self._kind = kind
        self._open = bool(open)

    @property
    def value(self) -> Decimal:
        return self._value

    @property
    def kind(self) -> int:
        return self._kind

    @property
    def open(self) -> bool:
        return self._open

    @property
    def closed(self) -> bool:
        return not self._open

    def __eq__(self, other):
        if not isinstance(other, Boundary):
            return NotImplemented
        return (
            self._value == other._value
            and self._kind == other._kind
            and self._open == other._open
        )

    def __hash__(self):
        return hash((Boundary, self._value, self._kind, self._open))

    def __repr__(self):
        return '<%s %s%s>' % (
            KIND_NAMES[self._kind],
            fmt_decimal(self._value),
            ' open' if self._open and self._kind != POINT else ''
        )

    def __getstate__(self):
        return self._value, self._kind, self._open

    def __setstate__(self, state):
        self._value, self._kind, self._open = state


def lower(value: Decimal, open: bool = INC) -> Boundary:
    return Boundary(value, LOWER, open)


def upper(value: Decimal, open: bool = INC) -> Boundary:
    return Boundary(value, UPPER, open)


def point(value: Decimal) -> Boundary:
    return Boundary(value, POINT, INC)


# ----------------------------------------------------------------------------------------------------------------------

class Cursor(Enum):
    '''Membership state of the values passed so far while scanning a boundary sequence.'''

    OUTSIDE = 0
    INSIDE = 1

    @property
    def inside(self) -> bool:
        return self is Cursor.INSIDE

    def advance(self, boundary: Boundary) -> 'Cursor':
        '''Return the cursor state right of ``boundary``.'''
        if boundary.kind == LOWER:
            return Cursor.INSIDE
        if boundary.kind == UPPER:
            return Cursor.OUTSIDE
        return self


# ----------------------------------------------------------------------------------------------------------------------
# Membership triples (left of, at, right of a coordinate)

Membership = Tuple[bool, bool, bool]


def membership(boundary: Boundary, cursor: Cursor) -> Membership:
    '''
    Membership of an operand immediately left of, exactly at and immediately right of the
    value of ``boundary``, given the operand's ``cursor`` before the boundary.
    '''
    if boundary.kind == LOWER:
        return False, boundary.closed, True
    if boundary.kind == UPPER:
        return True, boundary.closed, False
    inside = cursor.inside
    return inside, not inside, inside


def idle(cursor: Cursor) -> Membership:
    '''Membership of an operand that has no boundary at the coordinate in question.'''
    inside = cursor.inside
    return inside, inside, inside


def boundary_at(value: Decimal, left: bool, at: bool, right: bool) -> Optional[Boundary]:
    '''
    The canonical boundary at ``value`` that produces the given membership triple, or
    ``None`` if membership does not change at ``value``.
    '''
    if left != right:
        return Boundary(value, LOWER if right else UPPER, not at)
    if at != left:
        return point(value)
    return None
