"""
Test suite for bignum-decimal

Contains:
- tests/unit/          : Unit tests for individual modules
"""
