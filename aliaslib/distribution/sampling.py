"""Common interface of the samplers drawing from an alias table

The sampling cost counts the uniform random variables consumed, the lookup itself being O(1).
"""


import abc
from enum import Enum

import numpy as np


class SamplingMethod(Enum):
    """Formulation of the alias table lookup

    Both formulations read the same table and return the same index (up to floating-point rounding of the
    threshold), they only differ in the pair of values being compared.
    """
    ALIAS = 1
    SQUAREHISTOGRAM = 2


class Sampling:
    """Base class of AliasMethod and of the Uniform generator feeding it"""
    def __init__(self):
        self.sampling_cost = 0

    def cost(self) -> int:
        """
        :return: number of uniform random variables consumed since the last reset
        """
        return self.sampling_cost

    def reset_sampling_cost(self):
        """reset the simulation cost to 0"""
        self.sampling_cost = 0

    @abc.abstractmethod
    def sample(self, size: int = 1) -> np.ndarray:
        """draw `size` variates

        :param size: number of draws
        :return: the drawn values (outcome indices, or the states they map to, for AliasMethod)
        """
