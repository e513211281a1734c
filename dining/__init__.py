"""Threaded dining philosophers simulation: argument parsing, simulation and command."""

__version__ = "0.1.0"
__all__ = ["__version__"]