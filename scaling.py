import argparse
import random

import numpy as np
from scipy.stats import linregress

from percolation_stats import PercolationStats

# finite-size scaling exponent, -1/nu with nu = 4/3 for 2D percolation
DEFAULT_EXPONENT = -3/4


def sweep(sizes, trials, seed=None):
    """
    Runs a PercolationStats experiment for every grid size in `sizes`.
    All experiments draw from one generator, so a seed fixes the whole sweep.
    """
    sizes = [int(n) for n in sizes]
    if not sizes:
        raise ValueError("at least one grid size is required")

    rng = random.Random(seed)
    return [PercolationStats(n, trials, rng=rng) for n in sizes]


def extrapolate(sizes, means, exponent=DEFAULT_EXPONENT):
    """
    Fits the mean critical probability linearly against L^exponent and
    returns the intercept at L -> infinity as 'pc_inf', with the fit's
    'slope' and 'r_squared'.
    """
    L_values = np.asarray(sizes, dtype=float)
    means = np.asarray(means, dtype=float)

    if L_values.shape != means.shape:
        raise ValueError("sizes and means must have the same length")
    if len(np.unique(L_values)) < 2:
        raise ValueError("at least two distinct grid sizes are needed to extrapolate")

    X_scaling = L_values ** exponent
    slope, intercept, r_value, p_value, std_err = linregress(X_scaling, means)

    return {'pc_inf': float(intercept), 'slope': float(slope), 'r_squared': float(r_value ** 2)}


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run a Monte Carlo simulation for 2D site percolation over a range of grid sizes."
    )
    parser.add_argument('--Lmin', type=int, default=50,
                        help="Minimum size of the square grid (N_min x N_min).")
    parser.add_argument('--Lmax', type=int, default=200,
                        help="Maximum size of the square grid (N_max x N_max).")
    parser.add_argument('--Lstep', type=int, default=50,
                        help="Step size for increasing the grid size N.")
    parser.add_argument('--t', type=int, default=500,
                        help="The number of Monte Carlo trials to perform.")
    parser.add_argument('--seed', type=int, default=None,
                        help="Seed for the random number generator.")
    parser.add_argument('--exponent', type=float, default=DEFAULT_EXPONENT,
                        help="Scaling exponent used for the extrapolation.")
    args = parser.parse_args(argv)

    if args.Lmin <= 0 or args.Lstep <= 0 or args.Lmax < args.Lmin:
        parser.error("need 0 < Lmin <= Lmax and Lstep > 0")

    L_values = np.arange(args.Lmin, args.Lmax + 1, args.Lstep)

    print("Starting Monte Carlo Percolation Analysis...")
    print(f"System sizes (N): {args.Lmin} to {args.Lmax}, step {args.Lstep}")
    print(f"Trials per size: {args.t}")

    try:
        all_stats = sweep(L_values, args.t, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    for stats in all_stats:
        stats.report()

    print("\n--- Simulation Complete ---")

    if len(L_values) < 2:
        print("Only one system size, skipping extrapolation.")
        return 0

    res = extrapolate(L_values, [s.mean() for s in all_stats], exponent=args.exponent)
    print(f"\n--- Extrapolation Results (exponent {args.exponent:.2f}) ---")
    print(f"pc(infinity) = {res['pc_inf']:.6f}, R^2 = {res['r_squared']:.4f}")
    print("-------------------------------------------------------")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
