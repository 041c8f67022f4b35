"""
Domain models and value objects.

Contains the decay calculator input and result records.
"""

from src.core.domain.decay_state import DecayInput, DecayResult, compute_decay

__all__ = [
    "DecayInput",
    "DecayResult",
    "compute_decay",
]
