"""Deterministic random sources and an either-style faker for fake test data."""

__version__ = "0.1.0"
__all__ = ["either", "rng"]