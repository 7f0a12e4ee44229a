# setup.py
from setuptools import setup, find_packages

setup(
    name="dotlisp",
    version="0.1.0",
    description="Read-eval-print interpreter for a small LISP dialect",
    packages=find_packages(include=["dotlisp", "dotlisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["dotlisp=dotlisp.__main__:main"],
    },
    zip_safe=False,
)
