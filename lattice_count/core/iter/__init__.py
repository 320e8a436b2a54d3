"""
Odometer enumerators over bounded integer lattices.

- SeqLT: every coordinate in [0, bound)
- SeqLE: coordinate i in [0, bounds[i]]
"""

from lattice_count.core.iter.base import BoundedSequence
from lattice_count.core.iter.seq_le import SeqLE
from lattice_count.core.iter.seq_lt import SeqLT

__all__ = [
    "BoundedSequence",
    "SeqLE",
    "SeqLT",
]
