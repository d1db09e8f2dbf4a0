"""Benchmark of the alias table: construction time, sampling time (scalar and vectorised) and probability of an alias
lookup for Dirichlet-distributed probability mass functions of increasing size.

The results are printed in the console and saved into a `results` sub-folder
"""

import os
import time

import numpy as np
import pandas as pd

from aliaslib.distribution.configuration import no_alias_sentinel
from aliaslib.distribution.variate.alias import build_alias_table, sample_alias_table, sample_alias_table_vectorised
from aliaslib.statistic.tools import alias_probability
from aliaslib.tools.system import create_folder, get_path_filename
from aliaslib.tools.timer import timer


def elapsed(func, *args, **kwargs) -> float:
    t0 = time.perf_counter()
    func(*args, **kwargs)
    return time.perf_counter() - t0


@timer
def benchmark(sizes: list[int], nb_draws: int = 100_000, alpha: float = 0.5, seed: int = 12345) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    rows = []
    for n in sizes:
        probabilities = rng.dirichlet(np.full(n, alpha))
        t0 = time.perf_counter()
        table_probs, table_aliases = build_alias_table(probabilities)
        build_time = time.perf_counter() - t0

        us = rng.uniform(size=nb_draws)
        scalar_time = elapsed(lambda: [sample_alias_table(u, table_probs, table_aliases, n) for u in us])
        vectorised_time = elapsed(sample_alias_table_vectorised, us, table_probs, table_aliases)

        rows.append({
            "n": n,
            "build (s)": build_time,
            "scalar draw (ns)": 1e9 * scalar_time / nb_draws,
            "vectorised draw (ns)": 1e9 * vectorised_time / nb_draws,
            "alias probability": alias_probability(table_probs),
            "slots without alias": int(np.sum(table_aliases == no_alias_sentinel(table_aliases.dtype))),
        })

    return pd.DataFrame(rows)


if __name__ == '__main__':
    results = benchmark(sizes=[10, 100, 1_000, 10_000, 100_000])
    print(results.to_string(index=False))

    path, filename, _ = get_path_filename(__file__)
    result_folder = os.path.join(path, 'results')
    create_folder(result_folder)
    results.to_csv(os.path.join(result_folder, filename + '.csv'), index=False)
