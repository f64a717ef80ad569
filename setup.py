from setuptools import setup, find_packages

setup(
    name="connect4core",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["run"],
    install_requires=[
        "numpy",
        "gymnasium",  # environment driver in connect4core.game.env
    ],
    extras_require={
        "test": ["pytest"],
    },
)
