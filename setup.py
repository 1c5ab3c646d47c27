from setuptools import setup, find_packages

setup(
    name="checkoutsim",
    version="0.1.0",
    description="Discrete event simulation of supermarket checkout lines",
    packages=find_packages(include=["checkoutsim", "checkoutsim.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "tests": ["pytest"],
    },
    entry_points={
        "console_scripts": ["checkoutsim = checkoutsim.__main__:main"],
    },
    include_package_data=True,
    python_requires=">=3.13",
)
