"""
Test suite for eseries

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
