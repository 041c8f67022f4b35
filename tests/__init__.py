"""
Test suite for the decay calculator

Contains:
- tests/unit/          : Unit tests for math, models, contracts and the report CLI
"""
