"""
This module configures the package for distribution and installation.
"""

from setuptools import setup, find_packages

setup(
    name="termbrot",
    version="0.0.0",
    packages=find_packages(exclude=["tests"]),
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "termbrot = termbrot.__main__:main",
        ]
    },
)
