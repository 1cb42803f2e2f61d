"""
Maxwell distribution test driver.

Runs every mean accumulator on the signed and absolute speed grids, renders
the fixed-format text report and builds the accuracy comparison table.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

import numpy as np
import pandas as pd

from .algorithms import MEAN_METHODS, METHOD_LABELS
from .core import ArrayLike
from .distribution import (
    DEFAULT_DV,
    DEFAULT_SIZE,
    maxwell_dataset,
    theoretical_mean_abs,
)

logger = logging.getLogger(__name__)

LABEL_WIDTH = 25
PRECISION = 10

SIGNED_TITLE = "Maxwell distribution for speed values: "
ABSOLUTE_TITLE = "Maxwell distribution for absolute speed values: "
THEORY_LABEL = "Theoretical prediction"

MeanValue = Union[np.float32, np.float64]


@dataclass
class DistributionTestResult:
    """Means of the signed and absolute speed for one temperature."""

    temperature: float
    theoretical: float
    signed: Dict[str, MeanValue] = field(default_factory=dict)
    absolute: Dict[str, MeanValue] = field(default_factory=dict)
    timings: Dict[str, float] = field(default_factory=dict)


def evaluate_all(psi: ArrayLike, pdf: ArrayLike, dv: float,
                 timings: Optional[Dict[str, float]] = None) -> Dict[str, MeanValue]:
    """
    Run every registered accumulator on the same inputs.

    Args:
        psi: Sampled quantity
        pdf: Probability density at each sample point
        dv: Grid spacing
        timings: Optional dictionary receiving the elapsed seconds per method

    Returns:
        Ordered mapping from method key to its result
    """
    results = {}
    for name, func in MEAN_METHODS.items():
        start_time = time.perf_counter()
        results[name] = func(psi, pdf, dv)
        elapsed = time.perf_counter() - start_time

        if timings is not None:
            timings[name] = timings.get(name, 0.0) + elapsed
        logger.debug("%s: %.10f (%.3f s)", name, results[name], elapsed)
    return results


def run_distribution_test(temperature: float, dv: float = DEFAULT_DV,
                          size: int = DEFAULT_SIZE) -> DistributionTestResult:
    """
    Compute all means for the Maxwell distribution at the given temperature.

    Args:
        temperature: Distribution temperature T > 0
        dv: Grid spacing
        size: Number of grid points

    Returns:
        DistributionTestResult with both result blocks
    """
    dataset = maxwell_dataset(temperature, dv=dv, size=size)
    result = DistributionTestResult(
        temperature=dataset.temperature,
        theoretical=theoretical_mean_abs(dataset.temperature),
    )

    logger.info("Running %d methods on %d points for T=%g",
                len(MEAN_METHODS), dataset.size, dataset.temperature)
    result.signed = evaluate_all(dataset.psi, dataset.pdf, dataset.dv, result.timings)
    result.absolute = evaluate_all(dataset.abs_psi, dataset.pdf, dataset.dv, result.timings)

    return result


def _format_line(label: str, value: float) -> str:
    return f"{label + ':':<{LABEL_WIDTH}}{float(value):.{PRECISION}f}"


def format_report(result: DistributionTestResult) -> str:
    """Render the two result blocks as fixed-notation text."""
    lines: List[str] = [SIGNED_TITLE]
    for name, label in METHOD_LABELS.items():
        lines.append(_format_line(label, result.signed[name]))

    lines.append("")
    lines.append(ABSOLUTE_TITLE)
    lines.append(_format_line(THEORY_LABEL, result.theoretical))
    for name, label in METHOD_LABELS.items():
        lines.append(_format_line(label, result.absolute[name]))

    return "\n".join(lines) + "\n"


def accuracy_table(result: DistributionTestResult) -> pd.DataFrame:
    """
    Tabulate the error of each method.

    Args:
        result: Output of ``run_distribution_test``

    Returns:
        DataFrame with one row per method: signed and absolute means, the
        distance of the signed mean from zero and the absolute and relative
        errors of the absolute-speed mean against the theoretical prediction
    """
    rows = []
    for name, label in METHOD_LABELS.items():
        absolute = float(result.absolute[name])
        signed = float(result.signed[name])
        abs_error = abs(absolute - result.theoretical)
        rows.append({
            'method': name,
            'label': label,
            'signed': signed,
            'absolute': absolute,
            'signed_error': abs(signed),
            'abs_error': abs_error,
            'rel_error': abs_error / result.theoretical,
            'time': result.timings.get(name, np.nan),
        })

    return pd.DataFrame(rows)
