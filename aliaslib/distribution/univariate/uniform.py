"""Generator for standard uniform random variables

Numpy is used here, the generator returns random floats in the half-open interval [0.0, 1.0)
see https://numpy.org/doc/stable/reference/random/generated/numpy.random.Generator.uniform.html
"""

import numpy as np

from ..sampling import Sampling


class Uniform(Sampling):
    """Uniform random variate generator"""
    def __init__(self, low: float = 0.0, high: float = 1.0, seed: int = None) -> None:
        """
        :param low: lower bound (included)
        :param high: upper bound (excluded)
        :param seed: seed of the underlying numpy generator, a non-deterministic seed is used if None
        """
        super().__init__()
        self.low = low
        self.high = high
        self.rng = np.random.default_rng(seed)

    def sample(self, size: int = 1) -> np.ndarray:
        self.sampling_cost += size
        return self.rng.uniform(low=self.low, high=self.high, size=size)
