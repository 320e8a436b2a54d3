"""
Test suite for lattice-count

Contains:
- tests/unit/          : Unit tests for individual modules
"""
