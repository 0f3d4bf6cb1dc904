"""
setup.py configuration script for relational_config project.

Configuration resolution for relational change-data-capture connectors:
table and schema include/exclude rules, decimal handling and per-table
snapshot select overrides.
"""

from pathlib import Path

from setuptools import find_packages, setup

setup(
    name="relational_config",
    version="1.0.0",
    description="Configuration resolution for relational CDC connectors",
    long_description=Path("README.md").read_text(
        encoding="utf-8"
    ),
    long_description_content_type="text/markdown",
    packages=find_packages(where="./src"),
    package_dir={"": "src/"},
    entry_points={
        "console_scripts": [
            "relational-config=relational_config.cli.main:main",
        ],
    },
    install_requires=[
        "pydantic>=2.0.0",
        "pyyaml>=6.0",
        "setuptools",
        "wheel"
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=23.0.0",
            "isort>=5.12.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
            "coverage>=7.0.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "coverage>=7.0.0",
        ],
    },
    python_requires=">=3.8"
)
