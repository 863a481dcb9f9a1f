#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from setuptools import setup, find_packages

setup(
    name="nnir",
    version="0.1.0",
    description="Node and edge data model for a dataflow graph IR",
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "typing_extensions>=4.4",
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
