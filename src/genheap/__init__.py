"""Heap-snapshot fixture generator."""

__version__ = "0.1.0"
