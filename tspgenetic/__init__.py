"""Genetic-algorithm solver for the travelling salesman problem."""

__version__ = "0.1.0"
__all__ = ["__version__"]