"""Two-dimensional simulation of charged particles and their electric field, with a pygame viewer."""

__version__ = "0.1.0"
__all__ = ["__version__"]