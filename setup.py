# SPDX-FileCopyrightText: 2025 shamir-scheme contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="shamir-scheme",
    version="0.1.0",
    description="Validated creation parameters for Shamir's Secret Sharing",
    author="shamir-scheme contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "PyYAML<7.0,>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
    },
)
