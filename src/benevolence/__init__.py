"""Benevolence application intake and eligibility pre-scoring."""

__version__ = "0.1.0"

__all__ = ["__version__"]
