"""
Test suite for natorder

Contains:
- tests/unit/          : Unit tests for the comparator core, derived
                         comparators, name ordering and ordering properties
"""
