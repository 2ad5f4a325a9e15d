"""Build configuration for the sexpression package."""

from setuptools import setup

setup(
    name="sexpression",
    version="1.0.0",
    description="Recursive-descent parser and printer for Lisp-style S-expressions",
    python_requires=">=3.10",
    packages=["sexpression"],
    package_dir={"sexpression": "python/sexpression"},
    package_data={"sexpression": ["py.typed"]},
    extras_require={
        "test": ["pytest", "pytest-benchmark"],
    },
    entry_points={
        "console_scripts": ["sexpression = sexpression.cli:main"],
    },
)
