"""
Contract Validation Module

Модуль для валидации JSON контрактов lattice-count.
"""

from .validators import (
    ContractValidator,
    IntVecValidator,
    SchemaLoader,
    SeqLEConfigValidator,
    SeqLTConfigValidator,
    int_vec_from_contract,
    sequence_from_contract,
    validate_int_vec,
    validate_seq_config,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IntVecValidator",
    "SeqLTConfigValidator",
    "SeqLEConfigValidator",
    # Functions
    "validate_int_vec",
    "validate_seq_config",
    "int_vec_from_contract",
    "sequence_from_contract",
]
