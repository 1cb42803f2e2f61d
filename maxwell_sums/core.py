"""
Core single precision primitives.

This module contains the scalar building blocks shared by the mean
accumulators: input coercion to float32 buffers, the Kahan compensation
step and a correctly rounded single precision fused multiply-add.
"""

import math
import numbers
from typing import List, Sequence, Tuple, Union

import numpy as np
import torch

ArrayLike = Union[Sequence[float], np.ndarray, torch.Tensor]


def as_float32_array(values: ArrayLike, name: str = "values") -> np.ndarray:
    """
    Convert input values to a contiguous one-dimensional float32 array.

    Args:
        values: Python sequence, NumPy array or PyTorch tensor
        name: Name used in error messages

    Returns:
        Contiguous float32 array (the input itself when no conversion is needed)

    Raises:
        TypeError: If the values are not numeric
        ValueError: If the values are not one-dimensional
    """
    if isinstance(values, torch.Tensor):
        values = values.detach().cpu().numpy()
    elif isinstance(values, (list, tuple)):
        values = np.array(values)
    elif not isinstance(values, np.ndarray):
        raise TypeError(f"{name} must be a sequence, array or tensor, "
                        f"got {type(values).__name__}")

    if values.dtype.kind not in "biuf":
        raise TypeError(f"{name} must be numeric, got dtype {values.dtype}")
    if values.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {values.shape}")

    return np.ascontiguousarray(values, dtype=np.float32)


def as_float32_scalar(value: Union[float, np.floating], name: str = "dv") -> np.float32:
    """Convert a real number to a float32 scalar."""
    if isinstance(value, torch.Tensor):
        value = value.item()
    if not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    return np.float32(value)


def check_weighted_pair(psi: ArrayLike, pdf: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    """
    Coerce a sample array and its weights to matching float32 arrays.

    Args:
        psi: Sampled quantity
        pdf: Probability density at each sample point

    Returns:
        Tuple of (psi, pdf) as float32 arrays

    Raises:
        ValueError: If the arrays are empty or differ in length
    """
    psi = as_float32_array(psi, "psi")
    pdf = as_float32_array(pdf, "pdf")

    if psi.shape != pdf.shape:
        raise ValueError(f"psi and pdf must have the same length, "
                         f"got {psi.size} and {pdf.size}")
    if psi.size == 0:
        raise ValueError("psi and pdf must not be empty")

    return psi, pdf


def weighted_terms(psi: np.ndarray, pdf: np.ndarray) -> np.ndarray:
    """Per-element products psi[i]*pdf[i], each rounded to float32."""
    return np.multiply(psi, pdf, dtype=np.float32)


def kahan_add(a: np.float32, b: np.float32,
              c: np.float32 = np.float32(0.0)) -> Tuple[np.float32, np.float32]:
    """
    Single-step Kahan addition in single precision.

    Args:
        a: Running sum
        b: Value to add
        c: Current compensation term

    Returns:
        Tuple of (new_sum, new_compensation)
    """
    y = b - c
    t = a + y
    new_c = (t - a) - y
    return t, new_c


def _round_to_odd(s: float, e: float) -> float:
    # s + e is exact; pick the neighbour of s with an odd last bit when inexact
    if e == 0.0 or not math.isfinite(s):
        return s
    mantissa, _ = math.frexp(s)
    if int(mantissa * 2.0 ** 53) & 1:
        return s
    return math.nextafter(s, math.inf if e > 0.0 else -math.inf)


def fma32(a: Union[float, np.float32], b: Union[float, np.float32],
          c: Union[float, np.float32]) -> np.float32:
    """
    Fused multiply-add a*b + c with a single rounding to float32.

    The product of two float32 values is exact in double precision. The
    addition is made exact with a two-sum, rounded to odd in double precision
    and then rounded to nearest float32, which yields the correctly rounded
    single precision result without an intermediate double rounding error.

    Args:
        a: First factor
        b: Second factor
        c: Addend

    Returns:
        Correctly rounded float32 value of a*b + c
    """
    p = float(np.float32(a)) * float(np.float32(b))
    c = float(np.float32(c))

    s = p + c
    bp = s - p
    e = (p - (s - bp)) + (c - bp)

    return np.float32(_round_to_odd(s, e))


def fma32_accumulate(xs: List[float], ys: List[float],
                     acc: Union[float, np.float32] = 0.0) -> np.float32:
    """
    Accumulate acc = fma(xs[i], ys[i], acc) left to right.

    Args:
        xs: First factors as Python floats holding float32 values
        ys: Second factors as Python floats holding float32 values
        acc: Initial accumulator value

    Returns:
        Final float32 accumulator
    """
    acc = float(np.float32(acc))
    for x, y in zip(xs, ys):
        p = x * y
        s = p + acc
        bp = s - p
        e = (p - (s - bp)) + (acc - bp)
        acc = float(np.float32(_round_to_odd(s, e)))
    return np.float32(acc)
