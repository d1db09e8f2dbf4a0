"""Handling of parameters with constraint, for example positivity, dtype kind, etc.

This is done by specifying the setter/getter properties of the parameter.
"""

from functools import partial

import numpy as np


def argument_with_condition(argument_name, condition, message):
    def sp_getter(instance):
        return instance.__dict__[argument_name]

    def sp_setter(instance, value):
        if condition(value):
            instance.__dict__[argument_name] = value
        else:
            raise ValueError(argument_name + ": " + message)

    return property(sp_getter, sp_setter)


positive = partial(
    argument_with_condition,
    condition=lambda x: x >= 0,
    message="expected a positive value",
)


def _is_dtype_of_kind(value, kinds: str) -> bool:
    try:
        return np.dtype(value).kind in kinds
    except TypeError:
        return False


floating_dtype = partial(
    argument_with_condition,
    condition=lambda x: _is_dtype_of_kind(x, "f"),
    message="expected a numpy floating-point dtype",
)

unsigned_integer_dtype = partial(
    argument_with_condition,
    condition=lambda x: _is_dtype_of_kind(x, "u"),
    message="expected a numpy unsigned integer dtype",
)
