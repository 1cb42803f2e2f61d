#!/usr/bin/env python3
"""
Setup script for the Maxwell Summation package

This script builds the Python package comparing summation strategies on the
mean of a discretized Maxwell speed distribution.
"""

from pathlib import Path

from setuptools import setup, find_packages

# Package metadata
PACKAGE_NAME = "maxwell-summation"
VERSION = "1.0.0"
DESCRIPTION = "Accuracy comparison of summation strategies on a Maxwell distribution mean"
AUTHOR = "Maxwell Summation Contributors"
LICENSE = "MIT"

# Read long description from README
def read_readme():
    readme_path = Path(__file__).parent / "README.md"
    if readme_path.exists():
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return DESCRIPTION

# Package requirements
def get_requirements():
    """Get package requirements."""
    base_requirements = [
        "numpy>=1.19.0",
        "torch>=1.9.0",
        "pandas>=1.1",
    ]

    dev_requirements = [
        "pytest>=6.0",
        "pytest-cov>=2.0",
        "matplotlib>=3.3",
    ]

    return {
        "base": base_requirements,
        "dev": dev_requirements,
    }

# Setup configuration
def main():
    """Main setup function."""
    requirements = get_requirements()

    setup(
        name=PACKAGE_NAME,
        version=VERSION,
        description=DESCRIPTION,
        long_description=read_readme(),
        long_description_content_type="text/markdown",
        author=AUTHOR,
        license=LICENSE,

        # Package configuration
        packages=find_packages(include=["maxwell_sums", "maxwell_sums.*"]),

        # Dependencies
        install_requires=requirements["base"],
        extras_require={
            "dev": requirements["dev"],
        },
        python_requires=">=3.9",

        entry_points={
            "console_scripts": [
                "maxwell-sums=maxwell_sums.cli:main",
            ],
        },

        classifiers=[
            "Development Status :: 5 - Production/Stable",
            "Intended Audience :: Science/Research",
            "Intended Audience :: Education",
            "License :: OSI Approved :: MIT License",
            "Programming Language :: Python :: 3",
            "Topic :: Scientific/Engineering :: Mathematics",
            "Topic :: Scientific/Engineering :: Physics",
            "Operating System :: OS Independent",
        ],
        keywords=[
            "numerical", "summation", "kahan", "pairwise", "fma",
            "floating-point", "maxwell-distribution",
        ],
    )

if __name__ == "__main__":
    main()
