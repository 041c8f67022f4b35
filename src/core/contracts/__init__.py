"""
Contract Validation Module

JSON Schema контракты записей Decay Calculator.
"""

from .validators import (
    NON_FINITE_ALLOW,
    NON_FINITE_REJECT,
    SCHEMA_DIR,
    ContractRegistry,
    DecayContractValidator,
    check_decay_input,
    check_decay_result,
    default_registry,
    validate_decay_input,
    validate_decay_result,
)

__all__ = [
    # Constants
    "NON_FINITE_ALLOW",
    "NON_FINITE_REJECT",
    "SCHEMA_DIR",
    # Classes
    "ContractRegistry",
    "DecayContractValidator",
    # Functions
    "default_registry",
    "validate_decay_input",
    "validate_decay_result",
    "check_decay_input",
    "check_decay_result",
]
