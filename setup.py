"""
Setup script for the rps-engine package.

The public API (catalog.py, session.py, opponents.py, types.py, errors.py)
lives at the package top level; engine internals live in underscore
modules and subpackages (_engine, _shared, _config.py).
"""

from setuptools import setup, find_packages

setup(
    name="rps-engine",
    version="1.0.0",
    description="Rock-paper-scissors game engine with a delayed, cancellable turn resolution",
    author="RPS Engine Maintainers",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "rps-engine=rps_engine.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment",
    ],
)
