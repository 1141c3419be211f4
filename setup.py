from setuptools import setup, find_packages

from eui48 import VERSION

setup(
    name="eui48",
    description="Parsing and classification of IEEE 48-bit extended identifiers and MAC addresses",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
    version=VERSION,
)
