"""
Test suite for exclusive-ranges

Contains:
- tests/unit/          : Unit tests for range models, bounds and contracts
"""
