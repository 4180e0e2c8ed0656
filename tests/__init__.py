"""
Test suite for radix-convert

Contains:
- tests/unit/          : Unit tests for individual modules
"""
