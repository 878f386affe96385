#!/usr/bin/env python3
"""
Setup script for tilesampling (tileable Poisson-disk point sampling).

Defaults:
- Pure Python package; numpy does the per-round probe work.
- torch is required for tensor kernels and return_torch outputs.
- Optional test extra: pip install -e .[test]
"""

from pathlib import Path
from setuptools import setup, find_packages

project_root = Path(__file__).parent

setup(
    name="tilesampling",
    version="1.0.0",
    author="Changyong Song",
    description="Tileable Poisson-disk sampling of 2D point kernels on the unit square",
    long_description=(project_root / "README.md").read_text(encoding="utf-8") if (project_root / "README.md").exists() else "",
    packages=find_packages(include=["tilesampling", "tilesampling.*"]),
    zip_safe=False,
    python_requires=">=3.8",
    install_requires=["numpy", "torch", "pyyaml"],
    extras_require={"test": ["pytest"]},
)
