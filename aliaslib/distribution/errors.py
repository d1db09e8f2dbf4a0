"""Exceptions raised when building or checking an alias table"""


class InvalidDistribution(ValueError):
    """The input is not a probability mass function: empty, negative or non-finite weights, or weights not summing
    to 1 within the configured tolerance"""


class DimensionMismatch(ValueError):
    """The number of outcomes does not fit the index dtype (the maximum index value is reserved for the no-alias
    sentinel) or the table buffers have inconsistent sizes"""
