"""Useful tools for computing statistics of an alias table and of its samples

"""

import numpy as np
import scipy.stats


def empirical_frequencies(indices: np.ndarray, n: int) -> np.ndarray:
    """
    :param indices: sampled indices in [0, n)
    :param n: number of outcomes
    :return: frequency of each outcome
    """
    indices = np.asarray(indices)
    if indices.size == 0:  # nothing to do here
        return np.zeros(shape=n)
    return np.bincount(indices, minlength=n) / indices.size


def frequency_stddev(probabilities: np.ndarray, size: int) -> np.ndarray:
    """
    :return: standard deviation of the empirical frequencies of `size` draws, ie sqrt(p(1-p)/size)
    """
    p = np.asarray(probabilities, dtype=float)
    return np.sqrt(p * (1.0 - p) / size)


def chi_square_test(indices: np.ndarray, probabilities: np.ndarray) -> tuple[float, float]:
    """Pearson's chi-squared goodness-of-fit test of the sampled indices against the probability mass function

    Outcomes of zero probability are left out of the test, the p-value is 0 if any of them has been sampled.

    :return: the chi-squared statistic and the p-value
    """
    p = np.asarray(probabilities, dtype=float)
    counts = np.bincount(np.asarray(indices), minlength=p.size)
    support = p > 0
    if np.any(counts[~support] > 0):
        return np.inf, 0.0

    observed = counts[support]
    expected = p[support] / p[support].sum() * observed.sum()
    if observed.size == 1:  # a single outcome: nothing to test
        return 0.0, 1.0
    statistic, p_value = scipy.stats.chisquare(f_obs=observed, f_exp=expected)
    return float(statistic), float(p_value)


def alias_probability(table_probs: np.ndarray) -> float:
    """
    :return: probability that a draw goes through the alias branch of the table
    """
    return 1.0 - float(np.mean(table_probs))
