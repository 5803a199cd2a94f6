#!/usr/bin/env python3
"""
Setup script for mtx_library
"""

from pathlib import Path
from setuptools import setup, find_packages


def get_version():
    """Get version from package"""
    init_file = Path(__file__).parent / "mtx_library" / "__init__.py"
    with open(init_file, 'r', encoding='utf-8') as f:
        for line in f:
            if line.startswith('__version__'):
                return line.split('=')[1].strip().strip('"\'')
    return "1.0.0"


def get_requirements():
    """Read runtime requirements"""
    requirements = Path(__file__).parent / "requirements.txt"
    with open(requirements, 'r', encoding='utf-8') as f:
        return [
            line.strip() for line in f
            if line.strip() and not line.startswith('#')
        ]


setup(
    name="mtx-library",
    version=get_version(),
    description="Tape library changer control through mtx, with an in-memory simulator",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=get_requirements(),
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "mtx-library=mtx_library.cli:main",
        ],
    },
)
