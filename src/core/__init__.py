"""
Core domain models, mathematical primitives, and invariants.

This module contains the decay formula, its numerical safeguards,
and the input/result contracts, independent of any output channel.
"""
