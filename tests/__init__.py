"""
Test suite for textcore

Contains:
- tests/unit/          : Unit tests for individual modules
"""
