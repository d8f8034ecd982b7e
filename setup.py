"""
The setup.py file is a command line application built with setuptools.

It can be executed directly with python: `python setup.py --help`

The call to setuptools.setup (below) describes this python package and
enables all of the build, package, dist, install functionality required
to package this code for all the standard python tools like pip and pipenv
"""
from setuptools import setup, find_packages

setup(
    name="osfetch",
    description="Fetch ostree refs from a remote using ref globs.",
    version="0.1.0",
    packages=find_packages(include=["osfetch", "osfetch.*"]),
    python_requires=">=3.7",
    install_requires=[
        "colorama",
        "sentry-sdk",
        "structlog",
        "typing_extensions",
    ],
    extras_require={"test": ["pytest", "py"]},
    entry_points={"console_scripts": ["osfetch=osfetch.cli:main"]},
    zip_safe=True,
)
