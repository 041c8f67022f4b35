"""
Core math modules для Decay Calculator

Математические примитивы и формула распада с IEEE-754 семантикой.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # IEEE log/exp
    ieee_exp2,
    ieee_log2,
    # NaN/Inf checks
    is_valid_float,
    # Epsilon comparisons
    is_close,
    relative_error,
    # Validation
    validate_finite,
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

# Decay
from src.core.math.decay import (
    DECAY_RATE_MAX,
    DECAY_RATE_MIN,
    DEFAULT_DECAY_RATE,
    DEFAULT_ELAPSED_TIME_SEC,
    DEFAULT_INITIAL_AMOUNT,
    LOG1P_SWITCH_THRESHOLD,
    DecayDomainViolation,
    check_decay_domain,
    compute_decayed_amount,
    compute_decayed_amount_direct,
    decay_factor,
    decay_trajectory,
    half_life,
    rate_from_half_life,
    time_to_fraction,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_CALC",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — IEEE log/exp
    "ieee_exp2",
    "ieee_log2",
    # Numerical Safeguards — NaN/Inf checks
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    "relative_error",
    # Numerical Safeguards — Validation
    "validate_finite",
    "validate_in_range",
    "validate_non_negative",
    "validate_positive",
    # Decay — Constants
    "DECAY_RATE_MAX",
    "DECAY_RATE_MIN",
    "DEFAULT_DECAY_RATE",
    "DEFAULT_ELAPSED_TIME_SEC",
    "DEFAULT_INITIAL_AMOUNT",
    "LOG1P_SWITCH_THRESHOLD",
    # Decay — Exceptions
    "DecayDomainViolation",
    # Decay — Functions
    "check_decay_domain",
    "compute_decayed_amount",
    "compute_decayed_amount_direct",
    "decay_factor",
    "decay_trajectory",
    "half_life",
    "rate_from_half_life",
    "time_to_fraction",
]
