"""Configuration object for the alias table construction.

    :Example:
        - the floating-point dtype of the cutoff probabilities
        - the unsigned integer dtype of the aliases (its maximum value is the no-alias sentinel)
        - the tolerance on the sum of the probability mass function
        - the tolerance used to report residual worklist entries forced to 1
"""

import numpy as np

from ..tools.parameter import floating_dtype, positive, unsigned_integer_dtype


def no_alias_sentinel(index_dtype) -> int:
    """
    :param index_dtype: unsigned integer dtype of the aliases
    :return: the reserved index value meaning 'this slot has no alias', ie the maximum value of the dtype
    """
    return int(np.iinfo(index_dtype).max)


class AliasConfiguration:
    """Alias table global configuration"""

    real_dtype = floating_dtype("real_dtype")
    index_dtype = unsigned_integer_dtype("index_dtype")
    tolerance = positive("tolerance")
    drain_tolerance = positive("drain_tolerance")

    def __init__(self, real_dtype=np.float64, index_dtype=np.uint32, tolerance: float = 1e-6,
                 drain_tolerance: float = 1e-8, validate: bool = True):
        """
        :param real_dtype: dtype of the cutoff probabilities
        :param index_dtype: dtype of the aliases, the number of outcomes must be strictly less than its maximum value
        :param tolerance: maximum absolute deviation from 1 accepted for the sum of the probabilities
        :param drain_tolerance: residual worklist entries further than this from 1 are reported when forced to 1
        :param validate: if false, the probability mass function is not checked before building the table

            .. note:: with validate=False a malformed input produces an unspecified (but well-typed) table.
        """
        self.real_dtype = real_dtype
        self.index_dtype = index_dtype
        self.tolerance = tolerance
        self.drain_tolerance = drain_tolerance
        self.validate = validate

    @property
    def sentinel(self) -> int:
        return no_alias_sentinel(self.index_dtype)

    def __repr__(self) -> str:
        return (f"AliasConfiguration(real_dtype={np.dtype(self.real_dtype).name}, "
                f"index_dtype={np.dtype(self.index_dtype).name}, tolerance={self.tolerance}, "
                f"drain_tolerance={self.drain_tolerance}, validate={self.validate})")
