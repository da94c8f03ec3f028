from typing import Iterable

from .base.constants import LEFT_EXC, LEFT_INC, RIGHT_EXC, RIGHT_INC, SEP
from .base.decimals import fmt_decimal
from .boundaries import Boundary, Cursor, LOWER, UPPER


def render(boundaries: Iterable[Boundary]) -> str:
    '''
    Render a boundary sequence in interval notation, e.g. ``'(-Infinity, 0], [2, 2]'``.

    A point inside an interval splits it into two open intervals, a point outside of any
    interval renders as the closed singleton ``[v, v]``. The empty set renders as the empty string.
    '''
    chunks = []
    cursor = Cursor.OUTSIDE
    for b in boundaries:
        v = fmt_decimal(b.value)
        if b.kind == LOWER:
            if chunks:
                chunks.append(SEP)
            chunks.append('%s%s%s' % (LEFT_EXC if b.open else LEFT_INC, v, SEP))
        elif b.kind == UPPER:
            chunks.append('%s%s' % (v, RIGHT_EXC if b.open else RIGHT_INC))
        elif cursor.inside:
            chunks.append('%s%s%s%s%s%s' % (v, RIGHT_EXC, SEP, LEFT_EXC, v, SEP))
        else:
            if chunks:
                chunks.append(SEP)
            chunks.append('%s%s%s%s%s' % (LEFT_INC, v, SEP, v, RIGHT_INC))
        cursor = cursor.advance(b)
    return ''.join(chunks)
