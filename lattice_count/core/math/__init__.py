"""
Core math modules для lattice-count

Целочисленные guards и размеры решёток.
"""

from lattice_count.core.math.int_guards import (
    LATTICE_SIZE_WARN_THRESHOLD,
    is_strict_int,
    lattice_size,
    validate_index,
    validate_int,
    validate_non_negative_int,
    validate_positive_int,
)

__all__ = [
    # Constants
    "LATTICE_SIZE_WARN_THRESHOLD",
    # Type checks
    "is_strict_int",
    "validate_int",
    # Validation
    "validate_index",
    "validate_non_negative_int",
    "validate_positive_int",
    # Utilities
    "lattice_size",
]
