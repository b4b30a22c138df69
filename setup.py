from setuptools import setup

setup(
    name="avl",
    version="0.0.1",
    description="avl tree",
    author="thejchap",
    packages=["avl"],
    python_requires=">=3.8",
    install_requires=[
        "black",
        "pylint",
        "flake8",
        "mypy",
        "pytest",
        "hypothesis",
        "structlog",
        "colorama",
        "pyparsing>=3.1",
    ],
)
