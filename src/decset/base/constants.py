from decimal import Decimal


# ----------------------------------------------------------------------------------------------------------------------
# Boundary closedness, i.e. the value of the ``open`` flag of a boundary

INC = False
EXC = True


# ----------------------------------------------------------------------------------------------------------------------
# The two infinite sentinels of the extended real line

NINF = Decimal('-Infinity')
PINF = Decimal('Infinity')


##########
# TOKENS #
##########
CHAR_EMPTYSET = '∅'
CHAR_INFTY = '∞'

INFTY_ALIASES = {
    CHAR_INFTY: 'Infinity',
    '+' + CHAR_INFTY: 'Infinity',
    '-' + CHAR_INFTY: '-Infinity',
}

LEFT_INC = '['
LEFT_EXC = '('
RIGHT_INC = ']'
RIGHT_EXC = ')'

SEP = ', '
