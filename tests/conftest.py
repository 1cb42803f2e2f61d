#!/usr/bin/env python3
"""
Pytest configuration and fixtures for the Maxwell summation tests.

This file contains shared test fixtures, reference implementations and
assertion helpers used across the test suite.
"""

import logging
import math
import os
import sys

import numpy as np
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from maxwell_sums.distribution import maxwell_dataset
from maxwell_sums.log import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging, which bind the captured stderr."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def small_dataset():
    """Maxwell dataset small enough for the pure Python loops."""
    return maxwell_dataset(1.0, dv=0.01, size=1000)


@pytest.fixture(scope="session")
def full_dataset():
    """Full-size dataset at T = 1."""
    return maxwell_dataset(1.0)


@pytest.fixture
def random_pair():
    """Random float32 samples and positive weights."""
    rng = np.random.default_rng(42)
    psi = rng.normal(0, 1, 1000).astype(np.float32)
    pdf = rng.uniform(0, 1, 1000).astype(np.float32)
    return psi, pdf


@pytest.fixture
def cancellation_pair():
    """One large term followed by many terms below half an ulp of it."""
    psi = np.full(10001, 1e-8, dtype=np.float32)
    psi[0] = 1.0
    pdf = np.ones(10001, dtype=np.float32)
    return psi, pdf


def recursive_reference(psi, pdf, dv, start, end):
    """Literal recursive pairwise sum on float32 scalars."""
    if start == end:
        return psi[start] * pdf[start] * dv
    elif end - start == 1:
        return (psi[start] * pdf[start] + psi[end] * pdf[end]) * dv
    mid = (start + end) // 2
    return (recursive_reference(psi, pdf, dv, start, mid)
            + recursive_reference(psi, pdf, dv, mid + 1, end))


def close_values_reference(psi, pdf, dv):
    """Element-by-element stride loop on float32 scalars."""
    size = len(psi)
    add = [psi[i] * pdf[i] * dv for i in range(size)]
    incr = 1
    while incr < size:
        i = 0
        while i < size - incr:
            add[i] = add[i] + add[i + incr]
            i += 2 * incr
        incr *= 2
    return add[0]


def exact_weighted_sum(psi, pdf, dv) -> float:
    """Weighted sum of float32 inputs with a correctly rounded double sum."""
    products = psi.astype(np.float64) * pdf.astype(np.float64)
    return math.fsum(products.tolist()) * float(np.float32(dv))


@pytest.fixture
def references():
    """Reference implementations for bit-level comparisons."""
    return {
        'recursive': recursive_reference,
        'close_values': close_values_reference,
        'exact': exact_weighted_sum,
    }


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Full-size runs loop over a million elements in Python
        if "full_size" in item.name or "large" in item.name:
            item.add_marker(pytest.mark.slow)

        if "integration" in item.name or "end_to_end" in item.name:
            item.add_marker(pytest.mark.integration)


def assert_relative_error(computed, reference, max_relative_error):
    """Assert that relative error is within bounds."""
    if reference == 0:
        assert abs(computed) <= max_relative_error
    else:
        relative_error = abs(computed - reference) / abs(reference)
        assert relative_error <= max_relative_error, (
            f"Relative error {relative_error} exceeds threshold {max_relative_error}\n"
            f"Computed: {computed}, Reference: {reference}"
        )
