import argparse
import math
import random

import numpy as np

from percolation import Percolation

# z-value of the two-sided 95% confidence interval
CONFIDENCE_Z = 1.96


class PercolationStats:
    """
    Runs `trials` independent experiments on an n-by-n grid. Each experiment
    opens uniformly random sites until the grid percolates and records the
    fraction of open sites at that moment, an estimate of the percolation
    threshold.

    All statistics are computed once, here in the constructor. With a single
    trial the sample standard deviation is undefined: stddev() is nan and the
    confidence interval collapses to [mean, mean].
    """

    def __init__(self, n: int, trials: int, seed=None, rng=None):
        if n <= 0 or trials <= 0:
            raise ValueError("grid size n and trials count must be positive integers")

        self.gridSize = n
        self.trialCount = trials
        self.rng = rng if rng is not None else random.Random(seed)

        # one slot per trial
        self.trialResults = np.zeros(self.trialCount)
        for trial in range(self.trialCount):
            self.trialResults[trial] = self._run_trial()

        self._mean = float(np.mean(self.trialResults))
        if self.trialCount > 1:
            self._std = float(np.std(self.trialResults, ddof=1))
            halfWidth = CONFIDENCE_Z * self._std / math.sqrt(self.trialCount)
        else:
            self._std = math.nan
            halfWidth = 0.0
        self._ciLow = self._mean - halfWidth
        self._ciHigh = self._mean + halfWidth

    def _run_trial(self) -> float:
        simulator = Percolation(self.gridSize)
        while not simulator.percolates():
            row = self.rng.randint(1, self.gridSize)
            col = self.rng.randint(1, self.gridSize)
            simulator.open(row, col)
        return simulator.numberOfOpenSites() / (self.gridSize * self.gridSize)

    # sample mean of percolation threshold
    def mean(self) -> float:
        return self._mean

    # sample standard deviation of percolation threshold
    def stddev(self) -> float:
        return self._std

    # low endpoint of 95% confidence interval
    def confidenceLo(self) -> float:
        return self._ciLow

    # high endpoint of 95% confidence interval
    def confidenceHi(self) -> float:
        return self._ciHigh

    def results(self):
        return self.trialResults.copy()

    def report(self):
        print("=" * 60)
        print(f"STATS REPORT (n = {self.gridSize}, trials = {self.trialCount})")
        print("=" * 60)
        print(f"mean value of critical value pc = {self.mean(): .6f}")
        print(f"std value of critical value pc = {self.stddev(): .6f}")
        print(f"the 95% confidence interval is {self.confidenceLo()} ~ {self.confidenceHi()}")
        print("=" * 60)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Estimate the site percolation threshold of an n-by-n grid."
    )
    parser.add_argument('n', type=int, help="Size of the square grid (n x n).")
    parser.add_argument('T', type=int, help="The number of Monte Carlo trials to perform.")
    parser.add_argument('--seed', type=int, default=None,
                        help="Seed for the random number generator.")
    args = parser.parse_args(argv)

    try:
        stats = PercolationStats(args.n, args.T, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    print("mean                    = %f" % stats.mean())
    print("stddev                  = %f" % stats.stddev())
    print("95%% confidence interval = [%f, %f]" % (stats.confidenceLo(), stats.confidenceHi()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
