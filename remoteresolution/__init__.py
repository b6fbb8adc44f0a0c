"""Shared primitives, naming helpers and resolver building blocks for remote resource resolution."""

__version__ = "0.1.0"