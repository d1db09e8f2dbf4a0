"""Configuration file
"""

import numpy as np
import pytest

from aliaslib.distribution.configuration import AliasConfiguration


@pytest.fixture(scope="session")
def pmfs():
    val = {
        "single": np.array([1.0]),
        "equal": np.array([0.5, 0.5]),
        "skewed": np.array([0.1, 0.9]),
        "increasing": np.array([0.1, 0.2, 0.3, 0.4]),
        "with_zeros": np.array([0.0, 0.25, 0.0, 0.75]),
        "dice": np.full(6, 1.0 / 6.0),
    }
    return val


@pytest.fixture
def pmf(request, pmfs):
    return pmfs[request.param]


@pytest.fixture(scope="session")
def configuration():
    return AliasConfiguration()


@pytest.fixture(scope="session")
def sentinel(configuration):
    return configuration.sentinel


@pytest.fixture(scope="session")
def ill_conditioned_pmf():
    """weights within 1e-12 of 1/n and a few near-zero weights: long chains of transfers before the drain"""
    rng = np.random.default_rng(20220101)
    n = 1_000
    weights = np.full(n, 1.0) + rng.uniform(-1e-12, 1e-12, size=n)
    weights[:3] = 1e-15
    return weights / weights.sum()
