'''
Adapter for the arbitrary-precision decimal numbers of the :mod:`decimal` module.

All comparisons are exact. Parsing never rounds, so ``'2.0'`` keeps its exponent and renders
back as ``'2.0'``.
'''
import numbers
from decimal import Decimal, InvalidOperation

from dnutils import getlogger, logs

from .constants import NINF, PINF, INFTY_ALIASES
from .errors import ParseError


logger = getlogger('/decset/decimals', level=logs.INFO)


# ----------------------------------------------------------------------------------------------------------------------

def isinf(d: Decimal) -> bool:
    return d.is_infinite()


def isninf(d: Decimal) -> bool:
    return d.is_infinite() and d.is_signed()


def ispinf(d: Decimal) -> bool:
    return d.is_infinite() and not d.is_signed()


def isneg(d: Decimal) -> bool:
    '''Sign test. Note that ``-0`` is not negative.'''
    return d < 0


def compare(a: Decimal, b: Decimal) -> int:
    '''Total order on decimals and the two infinities. Returns -1, 0 or 1.'''
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def fmt_decimal(d: Decimal) -> str:
    return str(d)


# ----------------------------------------------------------------------------------------------------------------------

def _normalize(d: Decimal) -> Decimal:
    if d.is_nan():
        raise ParseError('NaN is not an orderable value: %s' % d, text=str(d))
    if d.is_infinite():
        return NINF if d.is_signed() else PINF
    return d


def parse_decimal(text: str) -> Decimal:
    '''
    Parse the decimal literal ``text``.

    Any spelling of infinity the :mod:`decimal` module accepts (``inf``, ``Infinity``,
    ``-infinity``, ...) as well as ``∞`` is read as the respective infinite sentinel.

    :param text:    the literal to be parsed
    :raises ParseError: if ``text`` is not a string, not a valid literal or NaN
    '''
    if not isinstance(text, str):
        raise ParseError(
            'Decimal literal must be a string, got %s' % type(text).__name__,
            text=repr(text)
        )
    literal = text.strip()
    literal = INFTY_ALIASES.get(literal, literal)
    try:
        d = Decimal(literal)
    except InvalidOperation:
        logger.debug('Rejecting malformed decimal literal %r' % text)
        raise ParseError('Illegal decimal literal: "%s"' % text, text=text) from None
    return _normalize(d)


def to_decimal(value) -> Decimal:
    '''
    Coerce ``value`` into a :class:`decimal.Decimal`.

    Strings are parsed, integers are converted exactly and floats by their shortest
    representation, so ``0.1`` becomes ``Decimal('0.1')``.
    '''
    if isinstance(value, Decimal):
        return _normalize(value)
    if isinstance(value, str):
        return parse_decimal(value)
    if isinstance(value, bool):
        raise ParseError('Not a decimal value: %r' % value, text=repr(value))
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    if isinstance(value, float):
        return parse_decimal(repr(value))
    raise ParseError(
        'Not a decimal value: %r (type %s)' % (value, type(value).__name__),
        text=repr(value)
    )
