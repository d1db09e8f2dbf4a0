"""ALIAS method to generate random variate from discrete probability distribution

The alias table is made of two flat arrays of size n: the cutoff probabilities and the aliases.
Building it costs O(n log n) with the heap worklists, drawing a sample costs O(1).

see https://en.wikipedia.org/wiki/Alias_method and https://www.keithschwarz.com/darts-dice-coins/
"""

import logging
from collections.abc import Callable
from typing import Any

import numpy as np

from ..configuration import AliasConfiguration, no_alias_sentinel
from ..errors import DimensionMismatch, InvalidDistribution
from ..sampling import Sampling, SamplingMethod
from ..univariate.uniform import Uniform
from .worklist import LargeWorklist, SmallWorklist


class AliasMethod(Sampling):
    """Alias Method"""

    def __init__(self, probabilities, states: Callable[[np.ndarray], Any] = None,
                 configuration: AliasConfiguration = None, method: SamplingMethod = SamplingMethod.ALIAS,
                 seed: int = None):
        """
        :param probabilities: vector of probabilities (which must sum to 1)
        :param states: discrete spatial states, maps the sampled indices to the returned values
        :param configuration: dtypes and tolerances of the alias table
        :param method: formulation of the table lookup
        :param seed: seed of the uniform generator
        """
        super().__init__()
        self.states = states
        self.method = method
        self.configuration = configuration or AliasConfiguration()
        self.q, self.J = build_alias_table(probabilities, configuration=self.configuration)
        self.K = self.q.size
        self.uniform = Uniform(seed=seed)

    def cost(self):
        return self.uniform.cost()

    def reset_sampling_cost(self):
        return self.uniform.reset_sampling_cost()

    def sample(self, size: int = 1) -> np.ndarray:
        us = self.uniform.sample(size=size)
        indices = sample_alias_table_vectorised(us, self.q, self.J, method=self.method)
        if self.states is None:
            return indices
        return self.states(indices)

    def draw_with_u(self, uniform: float) -> int:
        """ALIAS sampling with pre-generated uniform variable"""
        return sample_alias_table(uniform, self.q, self.J, self.K, method=self.method)


def _check_distribution(p: np.ndarray, tolerance: float) -> None:
    if p.size == 0:
        raise InvalidDistribution("empty probability mass function")
    if not np.all(np.isfinite(p)):
        raise InvalidDistribution("probabilities must be finite")
    if np.any(p < 0):
        raise InvalidDistribution(f"negative probability at index {int(np.argmax(p < 0))}")
    total = float(np.sum(p, dtype=np.float64))
    if abs(total - 1.0) > tolerance:
        raise InvalidDistribution(f"probabilities sum to {total!r}, expected 1 within {tolerance}")


def _output_buffer(buffer, n: int, dtype, name: str) -> np.ndarray:
    if buffer is None:
        return np.empty(shape=n, dtype=dtype)
    if not isinstance(buffer, np.ndarray) or buffer.shape != (n,):
        raise DimensionMismatch(f"{name} must be a numpy array of shape ({n},)")
    return buffer


def build_alias_table(probabilities, table_probs: np.ndarray = None, table_aliases: np.ndarray = None,
                      configuration: AliasConfiguration = None) -> tuple[np.ndarray, np.ndarray]:
    """Build an alias table over the given probability mass function (Vose's alias method)

    The worklists are min and max heaps: the largest entry of the large worklist always gives to the smallest entry
    of the small worklist, which leads to a smaller probability to perform an alias lookup at sampling time.

    :param probabilities: probability mass function of size n
    :param table_probs: optional output buffer of size n for the cutoff probabilities
    :param table_aliases: optional output buffer of size n for the aliases (its dtype gives the sentinel)
    :param configuration: dtypes and tolerances
    :return: the cutoff probabilities and the aliases, the buffers themselves when provided
    """
    configuration = configuration or AliasConfiguration()
    real_dtype = np.dtype(getattr(table_probs, "dtype", configuration.real_dtype))
    index_dtype = np.dtype(getattr(table_aliases, "dtype", configuration.index_dtype))
    if real_dtype.kind != "f" or index_dtype.kind != "u":
        raise ValueError("table_probs must have a floating-point dtype and table_aliases an unsigned integer dtype")

    p = np.asarray(probabilities, dtype=real_dtype)
    if p.ndim != 1:
        raise DimensionMismatch("expected a one-dimensional probability mass function")
    n = p.size
    sentinel = no_alias_sentinel(index_dtype)
    if n >= sentinel:
        raise DimensionMismatch(f"{n} outcomes do not fit the index dtype {index_dtype.name}, the number of "
                                f"outcomes must be less than {sentinel}")
    if configuration.validate:
        try:
            _check_distribution(p, configuration.tolerance)
        except InvalidDistribution as e:
            logging.error("alias table: " + str(e))
            raise

    table_probs = _output_buffer(table_probs, n, real_dtype, "table_probs")
    table_aliases = _output_buffer(table_aliases, n, index_dtype, "table_aliases")

    one = real_dtype.type(1)
    table_probs[:] = p * real_dtype.type(n)
    table_aliases[:] = sentinel

    small = SmallWorklist()
    large = LargeWorklist()
    for i in range(n):
        qi = table_probs[i]
        if qi < one:
            small.push(i, qi)
        else:
            large.push(i, qi)

    while not small.empty() and not large.empty():
        s = small.pop()
        l = large.pop()

        table_aliases[s] = l
        # more accurate than table_probs[l] - (1 - table_probs[s])
        ql = (table_probs[l] + table_probs[s]) - one
        table_probs[l] = ql

        if ql < one:
            small.push(l, ql)
        else:
            large.push(l, ql)

    # the remaining entries are 1 up to floating-point drift, either 1/n probabilities left in the large worklist
    # or a 1 accidentally converted to 0.999999 and put in the small worklist
    # the drift grows with the length of the transfer chains, hence a threshold of n ulps at least
    drain_tolerance = max(configuration.drain_tolerance, n * float(np.finfo(real_dtype).eps))
    nb_drained = nb_deviations = 0
    for worklist in (small, large):
        while not worklist.empty():
            i = worklist.pop()
            if abs(float(table_probs[i]) - 1.0) > drain_tolerance:
                nb_deviations += 1
            table_probs[i] = one
            nb_drained += 1

    logging.debug(f"alias table: n={n}, {nb_drained} slot(s) without alias")
    if nb_deviations:
        logging.warning(f"alias table: {nb_deviations} residual slot(s) further than {drain_tolerance:.3g} "
                        f"from 1 forced to 1, the probabilities probably do not sum to 1")

    return table_probs, table_aliases


def _as_table(table_probs, table_aliases) -> tuple[np.ndarray, np.ndarray]:
    table_probs = np.asarray(table_probs)
    table_aliases = np.asarray(table_aliases)
    # the sentinel is only defined by an unsigned dtype, plain integer sequences would hide it
    if table_aliases.dtype.kind != "u":
        raise DimensionMismatch("the aliases must have an unsigned integer dtype, got " + str(table_aliases.dtype))
    return table_probs, table_aliases


def _check_sizes(table_probs, table_aliases, n: int) -> None:
    if len(table_probs) != n or len(table_aliases) != n:
        raise DimensionMismatch(f"alias table of sizes ({len(table_probs)}, {len(table_aliases)}) "
                                f"used with n={n}")


def sample_alias_table(u: float, table_probs: np.ndarray, table_aliases: np.ndarray, n: int = None,
                       method: SamplingMethod = SamplingMethod.ALIAS) -> int:
    """Sample the probability mass function represented by the alias table (built with build_alias_table)

    :param u: uniform random number in [0, 1)
    :param table_probs: alias table probabilities (size n)
    :param table_aliases: alias table aliases (size n)
    :param n: number of values, the size of the table by default
    :param method: ALIAS compares the fractional part of n*u with the cutoff, SQUAREHISTOGRAM (Marsaglia et al.)
                   compares u with (cutoff + i)/n
    :return: the sampled index
    """
    table_probs, table_aliases = _as_table(table_probs, table_aliases)
    if n is None:
        n = table_probs.size
    _check_sizes(table_probs, table_aliases, n)

    nx = n * u
    i = int(nx)
    if i >= n:
        i = n - 1

    # float64 comparison whatever the real dtype, as in the vectorised version
    ui = float(table_probs[i])
    if method is SamplingMethod.ALIAS:
        x, cutoff = nx - i, ui
    else:
        x, cutoff = u, (ui + i) / n

    if x < cutoff:
        return i

    alias = int(table_aliases[i])
    # only reachable when n*u rounds up to n
    if alias == no_alias_sentinel(table_aliases.dtype):
        return i
    return alias


def sample_alias_table_vectorised(us, table_probs: np.ndarray, table_aliases: np.ndarray,
                                  method: SamplingMethod = SamplingMethod.ALIAS) -> np.ndarray:
    """Vectorised version of sample_alias_table

    :param us: array of uniform random numbers in [0, 1)
    :return: array of sampled indices (int64)
    """
    table_probs, table_aliases = _as_table(table_probs, table_aliases)
    n = table_probs.size
    _check_sizes(table_probs, table_aliases, n)
    us = np.asarray(us, dtype=np.float64)

    nx = n * us
    i = np.minimum(nx.astype(np.int64), n - 1)
    ui = table_probs[i]
    if method is SamplingMethod.ALIAS:
        accept = (nx - i) < ui
    else:
        accept = us < (ui + i) / n

    aliases = table_aliases[i]
    accept |= aliases == no_alias_sentinel(table_aliases.dtype)
    return np.where(accept, i, aliases.astype(np.int64))


def check_alias_table(table_probs: np.ndarray, table_aliases: np.ndarray, tolerance: float = 0.0) -> None:
    """Check the invariants of an alias table, for instance after reading the two arrays back from disk

    :param table_probs: alias table probabilities
    :param table_aliases: alias table aliases
    :param tolerance: accepted floating-point error on the cutoffs
    """
    table_probs = np.asarray(table_probs)
    table_aliases = np.asarray(table_aliases)
    if table_probs.ndim != 1 or table_probs.shape != table_aliases.shape:
        raise DimensionMismatch("the alias table arrays must be one-dimensional and of the same size")
    if table_aliases.dtype.kind != "u":
        raise DimensionMismatch("the aliases must have an unsigned integer dtype")

    n = table_probs.size
    sentinel = no_alias_sentinel(table_aliases.dtype)
    if n >= sentinel:
        raise DimensionMismatch(f"{n} outcomes do not fit the index dtype {table_aliases.dtype.name}")
    if not np.all(np.isfinite(table_probs)):
        raise InvalidDistribution("non-finite cutoff probability")
    if np.any(table_probs < -tolerance) or np.any(table_probs > 1.0 + tolerance):
        raise InvalidDistribution("cutoff probabilities must be in [0, 1]")

    no_alias = table_aliases == sentinel
    if np.any(np.abs(table_probs[no_alias] - 1.0) > tolerance):
        raise InvalidDistribution("a slot without alias must have a cutoff probability of 1")
    if np.any(table_aliases[~no_alias] >= n):
        raise DimensionMismatch(f"alias out of range [0, {n})")


def reconstruct_pmf(table_probs: np.ndarray, table_aliases: np.ndarray) -> np.ndarray:
    """
    :return: the probability mass function represented by the alias table
    """
    table_probs = np.asarray(table_probs, dtype=np.float64)
    table_aliases = np.asarray(table_aliases)
    n = table_probs.size
    with_alias = table_aliases != no_alias_sentinel(table_aliases.dtype)

    pmf = table_probs.copy()
    np.add.at(pmf, table_aliases[with_alias].astype(np.intp), 1.0 - table_probs[with_alias])
    return pmf / n
