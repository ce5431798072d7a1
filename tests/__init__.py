"""
Test suite for bignum

Contains:
- tests/unit/          : Unit tests for limb arithmetic, value types and contracts
"""
