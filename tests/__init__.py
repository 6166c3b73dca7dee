"""
Test suite for the shopping cart

Contains:
- tests/unit/          : Unit tests for individual modules
"""
