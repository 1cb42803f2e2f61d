"""
Weighted mean accumulators.

This module provides six strategies for the discrete weighted mean
sum(psi[i] * pdf[i]) * dv, each with different rounding error behaviour:
naive sequential summation, recursive pairwise summation, iterative
pairwise ("close value") summation, Kahan compensated summation, fused
multiply-add accumulation and double precision accumulation.

All accumulators except ``mean_precise`` work and return in single
precision. None of them modifies its inputs.
"""

from collections import OrderedDict
from typing import Callable, Dict, Optional, Union

import numpy as np

from .core import (
    ArrayLike,
    as_float32_scalar,
    check_weighted_pair,
    fma32_accumulate,
    kahan_add,
    weighted_terms,
)


def mean(psi: ArrayLike, pdf: ArrayLike, dv: float) -> np.float32:
    """
    Naive weighted mean with a single running float32 total.

    The products are added strictly left to right. ``np.add.accumulate`` is
    used instead of ``np.sum`` because the latter sums pairwise.

    Args:
        psi: Sampled quantity
        pdf: Probability density at each sample point
        dv: Grid spacing

    Returns:
        dv * sum(psi[i] * pdf[i]) in single precision
    """
    psi, pdf = check_weighted_pair(psi, pdf)
    dv = as_float32_scalar(dv)

    running = np.add.accumulate(weighted_terms(psi, pdf), dtype=np.float32)
    return dv * running[-1]


def mean_recursive(psi: ArrayLike, pdf: ArrayLike, dv: float,
                   start: int = 0, end: Optional[int] = None) -> np.float32:
    """
    Recursive pairwise weighted mean over the inclusive range [start, end].

    A range of one index yields psi[start]*pdf[start]*dv, a range of two
    adjacent indices yields (psi[start]*pdf[start] + psi[end]*pdf[end])*dv,
    and longer ranges are split at mid = (start + end) // 2 into [start, mid]
    and [mid + 1, end] whose results are added.

    The tree is built and reduced level by level instead of by Python call
    recursion, so results are bit-identical to the recursive definition.

    Args:
        psi: Sampled quantity
        pdf: Probability density at each sample point
        dv: Grid spacing
        start: First index of the range
        end: Last index of the range (default: last element)

    Returns:
        Pairwise sum in single precision

    Raises:
        ValueError: If the range is empty or out of bounds
    """
    psi, pdf = check_weighted_pair(psi, pdf)
    dv = as_float32_scalar(dv)
    if end is None:
        end = psi.size - 1
    if not 0 <= start <= end < psi.size:
        raise ValueError(f"Invalid range [{start}, {end}] for {psi.size} elements")

    terms = weighted_terms(psi, pdf)

    # Split phase: record, per level, which ranges are leaves and their values
    starts = np.array([start], dtype=np.int64)
    ends = np.array([end], dtype=np.int64)
    levels = []
    while starts.size:
        is_leaf = ends - starts <= 1
        leaf_values = np.zeros(starts.size, dtype=np.float32)

        s, e = starts[is_leaf], ends[is_leaf]
        leaf_values[is_leaf] = np.where(s == e,
                                        terms[s] * dv,
                                        (terms[s] + terms[e]) * dv)
        levels.append((is_leaf, leaf_values))

        s, e = starts[~is_leaf], ends[~is_leaf]
        mid = (s + e) // 2
        # Children of the next level: all left halves, then all right halves
        starts = np.concatenate([s, mid + 1])
        ends = np.concatenate([mid, e])

    # Reduce phase: combine children bottom-up
    values = np.zeros(0, dtype=np.float32)
    for is_leaf, leaf_values in reversed(levels):
        n_branch = values.size // 2
        combined = leaf_values.copy()
        combined[~is_leaf] = values[:n_branch] + values[n_branch:]
        values = combined

    return values[0]


def mean_close_values(psi: ArrayLike, pdf: ArrayLike, dv: float) -> np.float32:
    """
    Iterative pairwise weighted mean, adding values of close magnitude.

    Each element add[i] = psi[i]*pdf[i]*dv is merged with its neighbour at
    stride incr = 1, 2, 4, ... for every i in range(0, size - incr, 2*incr).
    The answer accumulates in add[0]. For sizes that are not a power of two
    the reduction tree differs from ``mean_recursive``.

    Args:
        psi: Sampled quantity
        pdf: Probability density at each sample point
        dv: Grid spacing

    Returns:
        Pairwise sum in single precision
    """
    psi, pdf = check_weighted_pair(psi, pdf)
    dv = as_float32_scalar(dv)

    add = weighted_terms(psi, pdf) * dv
    size = add.size
    incr = 1
    while incr < size:
        idx = np.arange(0, size - incr, 2 * incr)
        add[idx] += add[idx + incr]
        incr *= 2

    return add[0]


def mean_kahan(psi: ArrayLike, pdf: ArrayLike, dv: float) -> np.float32:
    """
    Weighted mean using Kahan compensated summation in single precision.

    Args:
        psi: Sampled quantity
        pdf: Probability density at each sample point
        dv: Grid spacing

    Returns:
        Compensated sum times dv in single precision
    """
    psi, pdf = check_weighted_pair(psi, pdf)
    dv = as_float32_scalar(dv)

    sum_val = np.float32(0.0)
    c = np.float32(0.0)
    for term in weighted_terms(psi, pdf):
        sum_val, c = kahan_add(sum_val, term, c)

    return sum_val * dv


def mean_fma(psi: ArrayLike, pdf: ArrayLike, dv: float) -> np.float32:
    """
    Weighted mean accumulated with one fused multiply-add per element.

    Args:
        psi: Sampled quantity
        pdf: Probability density at each sample point
        dv: Grid spacing

    Returns:
        dv * sum in single precision
    """
    psi, pdf = check_weighted_pair(psi, pdf)
    dv = as_float32_scalar(dv)

    sum_val = fma32_accumulate(psi.tolist(), pdf.tolist())
    return dv * sum_val


def mean_precise(psi: ArrayLike, pdf: ArrayLike, dv: float) -> np.float64:
    """
    Weighted mean accumulated in double precision from float32 inputs.

    Args:
        psi: Sampled quantity
        pdf: Probability density at each sample point
        dv: Grid spacing

    Returns:
        dv * sum in double precision
    """
    psi, pdf = check_weighted_pair(psi, pdf)
    dv = as_float32_scalar(dv)

    terms = psi.astype(np.float64) * pdf.astype(np.float64)
    running = np.add.accumulate(terms)
    return np.float64(dv) * running[-1]


MeanFunction = Callable[[ArrayLike, ArrayLike, float], Union[np.float32, np.float64]]

MEAN_METHODS: Dict[str, MeanFunction] = OrderedDict([
    ("normal", mean),
    ("recursive", mean_recursive),
    ("close_values", mean_close_values),
    ("kahan", mean_kahan),
    ("fma", mean_fma),
    ("precise", mean_precise),
])

METHOD_LABELS: Dict[str, str] = OrderedDict([
    ("normal", "Normal"),
    ("recursive", "Recursive"),
    ("close_values", "Close value sums"),
    ("kahan", "Kahan sums"),
    ("fma", "FMA sums"),
    ("precise", "Precise value sums"),
])


def compute_mean(psi: ArrayLike, pdf: ArrayLike, dv: float,
                 method: str = "normal") -> Union[np.float32, np.float64]:
    """
    Compute the weighted mean with the named method.

    Args:
        psi: Sampled quantity
        pdf: Probability density at each sample point
        dv: Grid spacing
        method: One of the keys of ``MEAN_METHODS``

    Returns:
        Weighted mean from the selected accumulator
    """
    try:
        func = MEAN_METHODS[method]
    except KeyError:
        raise ValueError(f"Unknown method: {method}") from None
    return func(psi, pdf, dv)
