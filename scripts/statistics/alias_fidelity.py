"""Plot the empirical frequencies of the alias method against the probability mass function, for both formulations
of the table lookup.
"""

import matplotlib.pyplot as plt
import numpy as np
from scipy.stats import binom

from aliaslib.distribution.sampling import SamplingMethod
from aliaslib.distribution.variate.alias import AliasMethod
from aliaslib.statistic.tools import chi_square_test, empirical_frequencies, frequency_stddev
from aliaslib.tools.timer import timer

plt.style.use('ggplot')


@timer
def alias_fidelity(probabilities: np.ndarray, size: int = 1_000_000, seed: int = 2022):
    n = probabilities.size
    fig, axs = plt.subplots(1, 2, sharey=True)
    for ax, method in zip(axs, SamplingMethod):
        sampler = AliasMethod(probabilities, method=method, seed=seed)
        indices = sampler.sample(size=size)
        frequencies = empirical_frequencies(indices, n)
        statistic, p_value = chi_square_test(indices, probabilities)
        print('{:16}: chi2 = {:>8.3f}, p-value = {:>6.4f}'.format(method.name, statistic, p_value))

        ax.bar(np.arange(n), frequencies, color='green', alpha=0.40, label='empirical')
        ax.errorbar(np.arange(n), probabilities, yerr=3*frequency_stddev(probabilities, size), fmt='o', color='k',
                    markersize=3, label='pmf (3 stddev)')
        ax.set_title(method.name.lower())
        ax.set_xlabel('outcome')
    axs[0].set_ylabel('probability')
    axs[0].legend()
    plt.show()


if __name__ == '__main__':
    # binomial(20, 0.3) probability mass function
    my_probabilities = binom.pmf(np.arange(21), 20, 0.3)
    alias_fidelity(my_probabilities / my_probabilities.sum())
