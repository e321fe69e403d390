"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks: the series catalog,
numerical primitives, error types and JSON contracts.
"""
