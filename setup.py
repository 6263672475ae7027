"""Setup script for filedatacache.

Usage:
    # Install package
    pip install -e .

    # With test dependencies
    pip install -e ".[test]"

    # Colored console logging on Windows
    pip install -e ".[color]"
"""

from pathlib import Path

from setuptools import find_packages, setup

HERE = Path(__file__).parent


def read_version() -> str:
    """Read __version__ from the package without importing it."""
    init_file = HERE / "filedatacache" / "__init__.py"
    for line in init_file.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("\"'")
    raise RuntimeError("Unable to find __version__ in filedatacache/__init__.py")


setup(
    name="filedatacache",
    version=read_version(),
    description="Lazily refreshing cache of values derived from files, keyed by path",
    python_requires=">=3.10",
    packages=find_packages(include=["filedatacache", "filedatacache.*"]),
    install_requires=[
        "typing_extensions>=4.0",
    ],
    extras_require={
        "color": ["colorama>=0.4.6"],
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
