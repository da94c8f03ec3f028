from typing import Optional


class ParseError(ValueError):
    '''Error that is raised when a text cannot be read as a decimal value or as a set.'''

    def __init__(self, msg: str = None, text: Optional[str] = None):
        super().__init__(msg)
        self._text = text

    @property
    def text(self) -> Optional[str]:
        return self._text


# ----------------------------------------------------------------------------------------------------------------------

class ValidationError(ValueError):
    '''
    Error that is raised on structurally malformed boundary sequences.

    ``index`` is the position of the offending boundary in the sequence, or ``None`` if the
    violation concerns the sequence as a whole.
    '''

    def __init__(self, msg: str = None, index: Optional[int] = None):
        super().__init__(msg)
        self._index = index

    @property
    def index(self) -> Optional[int]:
        return self._index


class UnsortedOrDuplicate(ValidationError):
    '''The boundary value is not strictly greater than its predecessor.'''


class InfiniteMustBeOpen(ValidationError):
    '''An infinite value is attached to a boundary that includes it.'''


class LowerWhileInside(ValidationError):
    '''A lower bound occurs while the values left of it are in-set already.'''


class UpperWhileOutside(ValidationError):
    '''An upper bound occurs while the values left of it are out-of-set already.'''


class PointMustBeClosed(ValidationError):
    '''A point boundary, which is closed by definition, is flagged open.'''


class UnterminatedTrailingInterval(ValidationError):
    '''The last interval of the sequence has no upper bound.'''
