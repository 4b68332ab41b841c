#!/usr/bin/env python3
"""
Example of querying the built-in distributions.

Shows how to:
1. Construct a distribution with a fixed seed
2. Evaluate its probability mass at a point
3. Read moments and draw samples
"""

import sys
from pathlib import Path

# Make the sources importable without installing the package
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root / "src"))


def example_binomial_pdf():
    """Probability of 9 successes in 10 trials with p = 0.65."""
    from pysatl_stats import BinomialDistribution

    distribution = BinomialDistribution(n=10, p=0.65, seed=1)
    print(distribution.pdf(9))


def example_normal_summary():
    """Summary statistics and a few draws of the standard normal."""
    from pysatl_stats import EntropyUnit, NormalDistribution

    distribution = NormalDistribution(mu=0.0, sigma=1.0, seed=1)
    print(f"mean={distribution.mean()} variance={distribution.variance()}")
    print(f"quantile(0.975)={distribution.quantile(0.975)}")
    print(f"entropy={distribution.entropy(EntropyUnit.SHANNON):.6f} bits")
    print(f"samples={distribution.sample_many(5)}")


if __name__ == "__main__":
    example_binomial_pdf()
    example_normal_summary()
