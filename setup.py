# setup.py - Package finite_dinaturals
from setuptools import setup

setup(
    name="finite_dinaturals",
    version="0.1.0",
    description="Exhaustive search for commutative squares and dinatural families over finite sets",
    packages=["finite_dinaturals"],
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["finite-dinaturals=finite_dinaturals.driver:main"],
    },
)
