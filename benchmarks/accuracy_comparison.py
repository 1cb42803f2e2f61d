#!/usr/bin/env python3
"""
Accuracy comparison benchmark for the Maxwell mean accumulators.

This script sweeps the distribution temperature, runs every summation
strategy on the full-size grid and tabulates the error of each against the
analytic mean of the absolute speed.
"""

import argparse
import sys

import matplotlib.pyplot as plt
import pandas as pd

sys.path.append('..')

from maxwell_sums import accuracy_table, run_distribution_test
from maxwell_sums.log import setup_logging

TEMPERATURES = [0.25, 0.5, 1.0, 2.0, 4.0, 8.0]


class AccuracyBenchmark:
    """
    Accuracy benchmark across temperatures.
    """

    def __init__(self, temperatures=None):
        self.temperatures = temperatures or TEMPERATURES

    def run(self) -> pd.DataFrame:
        """
        Run all methods for every temperature.

        Returns:
            DataFrame with one row per (temperature, method)
        """
        frames = []
        for i, temperature in enumerate(self.temperatures):
            print(f"[{i + 1}/{len(self.temperatures)}] T = {temperature}")
            table = accuracy_table(run_distribution_test(temperature))
            table.insert(0, 'temperature', temperature)
            frames.append(table)

        return pd.concat(frames, ignore_index=True)

    def analyze_results(self, df: pd.DataFrame):
        """Print summary statistics of the relative error per method."""
        print("\n" + "=" * 60)
        print("RELATIVE ERROR AGAINST sqrt(T/pi)")
        print("=" * 60)

        summary = df.groupby('label', sort=False)['rel_error'].agg(['median', 'max'])
        print(summary.to_string(float_format=lambda x: f"{x:.3e}"))

        print("\nMean time per method (s):")
        timing = df.groupby('label', sort=False)['time'].mean()
        print(timing.to_string(float_format=lambda x: f"{x:.3f}"))

    def plot_results(self, df: pd.DataFrame, save_plots: bool = True):
        """Plot relative error against temperature for each method."""
        plt.figure(figsize=(10, 6))

        for label, group in df.groupby('label', sort=False):
            plt.plot(group['temperature'], group['rel_error'], marker='o', label=label)

        plt.xlabel('Temperature T')
        plt.ylabel('Relative error of mean |v|')
        plt.title('Summation accuracy on the Maxwell distribution')
        plt.xscale('log')
        plt.yscale('log')
        plt.legend()
        plt.grid(True, alpha=0.3)

        if save_plots:
            plt.savefig('maxwell_accuracy.png', dpi=300, bbox_inches='tight')
        plt.show()


def main():
    """Run the accuracy benchmark."""
    parser = argparse.ArgumentParser(description="Maxwell summation accuracy benchmark")
    parser.add_argument("--temperatures", type=float, nargs="+", default=TEMPERATURES)
    parser.add_argument("--output", default="accuracy_benchmark_results.csv")
    parser.add_argument("--no-plot", action="store_true", default=False)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    setup_logging(args.log_level)

    print("MAXWELL SUMMATION - ACCURACY BENCHMARK")
    print("=" * 60)

    benchmark = AccuracyBenchmark(args.temperatures)
    results_df = benchmark.run()

    results_df.to_csv(args.output, index=False)
    print(f"\nResults saved to {args.output}")

    benchmark.analyze_results(results_df)

    if not args.no_plot:
        benchmark.plot_results(results_df)


if __name__ == "__main__":
    main()
