"""
Test suite for the Maxwell Summation package.

Test Structure:
- test_core.py: Tests for single precision primitives
- test_algorithms.py: Tests for the six mean accumulators
- test_distribution.py: Tests for the Maxwell dataset generator
- test_report.py: Tests for the driver, report and command line
- conftest.py: Shared fixtures, reference implementations and configuration

Usage:
    # Run all tests
    pytest

    # Run tests with coverage
    pytest --cov=maxwell_sums

    # Skip the million-point runs
    pytest -m "not slow"
"""

__version__ = "1.0.0"
