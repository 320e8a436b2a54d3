"""
Domain models and value objects.

Contains the fundamental value object IntVec.
"""

from lattice_count.core.domain.int_vec import IntVec

__all__ = [
    "IntVec",
]
