import re
from typing import Iterable, Iterator, Tuple

from dnutils import getlogger, logs

from . import algebra
from .base.constants import INC, EXC, NINF, PINF, CHAR_EMPTYSET, LEFT_EXC, RIGHT_EXC
from .base.decimals import compare, isinf, parse_decimal, to_decimal
from .base.errors import ParseError
from .boundaries import Boundary, Cursor, lower, upper, point, membership
from .rendering import render
from .validation import validate, isvalid


logger = getlogger('/decset/sets', level=logs.INFO)


_INTERVAL = re.compile(
    r'\s*(?P<ldelim>[\[(])'
    r'\s*(?P<lval>[^,\[\]()\s]+)\s*,'
    r'\s*(?P<rval>[^,\[\]()\s]+)\s*'
    r'(?P<rdelim>[\])])\s*'
)


# ----------------------------------------------------------------------------------------------------------------------

class DecimalSet:
    '''
    Immutable subset of the extended real line, represented as a finite union of intervals
    with open, closed or infinite boundaries over arbitrary-precision decimal values.

    Internally, a set is the ascending sequence of its boundaries (see :mod:`decset.boundaries`).
    Sets are obtained from :func:`new`, :func:`new_from_strings` or :meth:`parse` and
    combined by :meth:`complement`, :meth:`union` and :meth:`intersection`, which always yield
    new sets in canonical form.

    :Example:

        >>> from decset import new, INC, EXC
        >>> s = new(3, EXC, 'Infinity', EXC)
        >>> print(s.intersection(new(5, INC, 7, INC).complement()))
        (3, 5), (7, Infinity)
        >>> print(new(0, INC, 1, INC) | new(2, INC, 3, EXC))
        [0, 1], [2, 3)

    '''

    __slots__ = ('_boundaries',)

    def __init__(self, boundaries: Iterable[Boundary] = ()):
        self._boundaries = tuple(boundaries)

    @staticmethod
    def emptyset() -> 'DecimalSet':
        return EMPTY

    @staticmethod
    def parse(text: str) -> 'DecimalSet':
        '''
        Read a set in interval notation, such as ``'(-Infinity, 0], [2, 2]'``.

        Intervals are separated by commas and may overlap, touch or come in any order. Both
        ``Infinity`` and ``∞`` denote infinity, ``∅`` and the empty string denote the empty set.

        :raises ParseError: if ``text`` is not in interval notation
        '''
        if not isinstance(text, str):
            raise ParseError('Set notation must be a string, got %s' % type(text).__name__, text=repr(text))
        if text.strip() in ('', CHAR_EMPTYSET):
            return EMPTY
        result = EMPTY
        pos = 0
        while True:
            match = _INTERVAL.match(text, pos)
            if match is None:
                logger.debug('Rejecting set notation %r at position %d' % (text, pos))
                raise ParseError('Illegal interval notation at position %d in "%s"' % (pos, text), text=text)
            result = result.union(DecimalSet._interval(match, text))
            pos = match.end()
            if pos == len(text):
                return result
            if text[pos] != ',':
                raise ParseError('Expected "," at position %d in "%s"' % (pos, text), text=text)
            pos += 1

    @staticmethod
    def _interval(match, text: str) -> 'DecimalSet':
        lval = parse_decimal(match.group('lval'))
        rval = parse_decimal(match.group('rval'))
        lopen = match.group('ldelim') == LEFT_EXC
        ropen = match.group('rdelim') == RIGHT_EXC
        c = compare(lval, rval)
        if c > 0:
            raise ParseError(
                'Lower bound %s exceeds upper bound %s in "%s"' % (lval, rval, text),
                text=text
            )
        if not c and (lopen or ropen):
            return EMPTY
        return new(lval, lopen, rval, ropen)

    @property
    def boundaries(self) -> Tuple[Boundary, ...]:
        return self._boundaries

    def validate(self) -> None:
        '''Raise the matching :class:`~decset.base.errors.ValidationError` if this set is malformed.'''
        validate(self._boundaries)

    def isvalid(self) -> bool:
        return isvalid(self._boundaries)

    def isempty(self) -> bool:
        return not self._boundaries

    def isninf(self) -> bool:
        '''Check whether this set is unbounded towards negative infinity.'''
        return bool(self._boundaries) and self._boundaries[0].value == NINF

    def ispinf(self) -> bool:
        '''Check whether this set is unbounded towards positive infinity.'''
        return bool(self._boundaries) and self._boundaries[-1].value == PINF

    def contains_value(self, value) -> bool:
        '''Checks if ``value`` is an element of this set.'''
        value = to_decimal(value)
        cursor = Cursor.OUTSIDE
        for b in self._boundaries:
            c = compare(value, b.value)
            if c < 0:
                break
            if not c:
                return membership(b, cursor)[1]
            cursor = cursor.advance(b)
        return cursor.inside

    def complement(self) -> 'DecimalSet':
        return DecimalSet(algebra.complement(self._boundaries))

    def union(self, other: 'DecimalSet') -> 'DecimalSet':
        _check_operand(other)
        return DecimalSet(algebra.union(self._boundaries, other.boundaries))

    def intersection(self, other: 'DecimalSet') -> 'DecimalSet':
        _check_operand(other)
        return DecimalSet(algebra.intersection(self._boundaries, other.boundaries))

    def __contains__(self, value) -> bool:
        return self.contains_value(value)

    def __invert__(self) -> 'DecimalSet':
        return self.complement()

    def __or__(self, other):
        if not isinstance(other, DecimalSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, DecimalSet):
            return NotImplemented
        return self.intersection(other)

    def __iter__(self) -> Iterator[Boundary]:
        return iter(self._boundaries)

    def __len__(self) -> int:
        return len(self._boundaries)

    def __bool__(self) -> bool:
        return bool(self._boundaries)

    def __eq__(self, other):
        if not isinstance(other, DecimalSet):
            return NotImplemented
        return self._boundaries == other._boundaries

    def __hash__(self):
        return hash((DecimalSet, self._boundaries))

    def __str__(self):
        return render(self._boundaries)

    def __repr__(self):
        return '<%s=%s>' % (type(self).__name__, render(self._boundaries))

    def __getstate__(self):
        return (self._boundaries,)

    def __setstate__(self, state):
        self._boundaries, = state


EMPTY = DecimalSet()
R = DecimalSet([lower(NINF, EXC), upper(PINF, EXC)])


def _check_operand(other) -> None:
    if not isinstance(other, DecimalSet):
        raise TypeError('Operand must be of type %s, got %s' % (DecimalSet.__name__, type(other).__name__))


# ----------------------------------------------------------------------------------------------------------------------
# Constructors

def new(low, low_open: bool, high, high_open: bool) -> DecimalSet:
    '''
    Create the interval between ``low`` and ``high``.

    The bounds may be given in either order. Infinite bounds are always open. If both bounds
    are equal, the result is the closed singleton of that value regardless of the ``open``
    flags, or the empty set if the bounds are infinite.

    :param low:         one bound, a ``Decimal``, ``int``, ``float`` or decimal literal
    :param low_open:    whether ``low`` is excluded from the interval (``EXC``) or not (``INC``)
    :param high:        the other bound
    :param high_open:   whether ``high`` is excluded from the interval
    :raises ParseError: if a bound is not a valid decimal value
    '''
    low = to_decimal(low)
    high = to_decimal(high)
    if isinf(low):
        low_open = EXC
    if isinf(high):
        high_open = EXC

    c = compare(low, high)
    if not c:
        if isinf(low):
            return EMPTY
        return DecimalSet([point(low)])
    if c > 0:
        low, low_open, high, high_open = high, high_open, low, low_open
    return DecimalSet([lower(low, low_open), upper(high, high_open)])


def new_from_strings(low: str, high: str, low_open: bool = INC, high_open: bool = INC) -> DecimalSet:
    '''
    Create the interval between the decimal literals ``low`` and ``high``, closed by default.

    :raises ParseError: if either literal is malformed
    '''
    return new(parse_decimal(low), low_open, parse_decimal(high), high_open)


# ----------------------------------------------------------------------------------------------------------------------
# Operations on sets

def complement(s: DecimalSet) -> DecimalSet:
    _check_operand(s)
    return s.complement()


def union(a: DecimalSet, b: DecimalSet) -> DecimalSet:
    _check_operand(a)
    return a.union(b)


def intersection(a: DecimalSet, b: DecimalSet) -> DecimalSet:
    _check_operand(a)
    return a.intersection(b)
