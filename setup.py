"""
Setup script for the Historie timeline engine

Installation:
    pip install -e .          # Development mode (editable install)
    pip install -e .[test]    # With test dependencies

After installation, run with:
    historie-timeline layout data.json --width 1200
    python -m historie_timeline.cli   # Or directly
"""
from setuptools import setup, find_packages
from pathlib import Path

# Read requirements
requirements_file = Path(__file__).resolve().parent / "requirements.txt"
install_requires = []
if requirements_file.exists():
    with open(requirements_file, "r", encoding="utf-8") as f:
        install_requires = [
            line.strip()
            for line in f
            if line.strip() and not line.startswith("#")
        ]

setup(
    name="historie-timeline",
    version="0.1.0",
    description="Coordinate mapping, zoom/pan and lane assignment for a historical timeline",
    author="Historie",
    author_email="",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=install_requires,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "historie-timeline=historie_timeline.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering :: Visualization",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    include_package_data=True,
)
