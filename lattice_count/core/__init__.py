"""
Core domain models, enumerators, and invariants.

This module contains the foundational building blocks that are independent
of any consumer (counting routines, verification harnesses, etc.).
"""
