"""Custom exception hierarchy."""

from __future__ import annotations


class GenHeapError(Exception):
    """Base exception for the genheap package."""


class ValidationError(GenHeapError):
    """Raised when a fixture profile or option value is invalid."""
