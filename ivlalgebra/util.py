"""Notation constants for ivlalgebra.

Brackets follow standard interval notation: square brackets for closed
(included) endpoints, parentheses for open (excluded) ones.
"""

LEFT_CLOSED = "["
LEFT_OPEN = "("
RIGHT_CLOSED = "]"
RIGHT_OPEN = ")"
SEPARATOR = ", "
