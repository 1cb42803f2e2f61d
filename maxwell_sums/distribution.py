"""
Discretized Maxwell speed distribution.

Builds the single precision sample grids consumed by the mean accumulators:
the signed velocity, its absolute value and the one-dimensional
Maxwell-Boltzmann kernel pdf(v) = exp(-v**2 / T) / sqrt(pi * T).
"""

import logging
import math
import numbers
from typing import NamedTuple

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 1_000_000
DEFAULT_DV = 1e-3


class MaxwellDataset(NamedTuple):
    """Read-only sample grids for one temperature."""

    psi: np.ndarray
    abs_psi: np.ndarray
    pdf: np.ndarray
    dv: np.float32
    temperature: float

    @property
    def size(self) -> int:
        return self.psi.size


def validate_temperature(temperature: float) -> float:
    """Return the temperature as a float, rejecting non-finite or non-positive values."""
    if isinstance(temperature, bool) or not isinstance(temperature, numbers.Real):
        raise ValueError(f"Temperature must be a real number, got {temperature!r}")
    temperature = float(temperature)
    if not math.isfinite(temperature) or temperature <= 0:
        raise ValueError(f"Temperature must be positive and finite, got {temperature}")
    return temperature


def theoretical_mean_abs(temperature: float) -> float:
    """Analytic mean of |v| under the kernel: sqrt(T / pi)."""
    temperature = validate_temperature(temperature)
    return math.sqrt(temperature / math.pi)


def maxwell_dataset(temperature: float, dv: float = DEFAULT_DV,
                    size: int = DEFAULT_SIZE) -> MaxwellDataset:
    """
    Sample the Maxwell kernel on a symmetric velocity grid.

    The grid starts at -(size / 2) * dv and advances by a running double
    precision addition of the float32 step. Each velocity is stored in
    single precision; the density squares the single precision velocity
    and evaluates the rest of the formula in double precision before it is
    stored in single precision.

    Args:
        temperature: Distribution temperature T > 0
        dv: Grid spacing
        size: Number of grid points

    Returns:
        MaxwellDataset with read-only float32 arrays of length ``size``

    Raises:
        ValueError: If any parameter is out of range
    """
    temperature = validate_temperature(temperature)
    if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size <= 0:
        raise ValueError(f"size must be a positive integer, got {size!r}")
    if not isinstance(dv, numbers.Real) or not math.isfinite(dv) or dv <= 0:
        raise ValueError(f"dv must be positive and finite, got {dv!r}")

    size = int(size)
    dv32 = np.float32(dv)
    step = np.float64(dv32)

    increments = np.full(size, step, dtype=np.float64)
    increments[0] = -(size / 2) * step
    v = np.add.accumulate(increments)

    psi = v.astype(np.float32)
    abs_psi = np.abs(v).astype(np.float32)
    square = np.multiply(-psi, psi, dtype=np.float32)
    pdf = (1.0 / math.sqrt(temperature * math.pi)
           * np.exp(square.astype(np.float64) / temperature)).astype(np.float32)

    for array in (psi, abs_psi, pdf):
        array.flags.writeable = False

    logger.debug("Built Maxwell dataset: T=%g, dv=%g, size=%d, v in [%g, %g]",
                 temperature, dv32, size, v[0], v[-1])

    return MaxwellDataset(psi=psi, abs_psi=abs_psi, pdf=pdf,
                          dv=dv32, temperature=temperature)
