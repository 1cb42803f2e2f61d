"""
Maxwell Summation

Compares the numerical accuracy of six summation strategies on the weighted
mean of a Maxwell speed distribution against its analytic value.

This package provides:
- Naive, recursive pairwise and iterative pairwise summation
- Kahan compensated summation
- Fused multiply-add and double precision accumulation
- The discretized Maxwell distribution dataset and report driver
"""

from .core import fma32, kahan_add
from .algorithms import (
    MEAN_METHODS,
    METHOD_LABELS,
    compute_mean,
    mean,
    mean_close_values,
    mean_fma,
    mean_kahan,
    mean_precise,
    mean_recursive,
)
from .distribution import MaxwellDataset, maxwell_dataset, theoretical_mean_abs
from .report import (
    DistributionTestResult,
    accuracy_table,
    format_report,
    run_distribution_test,
)

__version__ = "1.0.0"
__author__ = "Maxwell Summation Contributors"

__all__ = [
    "fma32",
    "kahan_add",
    "MEAN_METHODS",
    "METHOD_LABELS",
    "compute_mean",
    "mean",
    "mean_recursive",
    "mean_close_values",
    "mean_kahan",
    "mean_fma",
    "mean_precise",
    "MaxwellDataset",
    "maxwell_dataset",
    "theoretical_mean_abs",
    "DistributionTestResult",
    "accuracy_table",
    "format_report",
    "run_distribution_test",
]
