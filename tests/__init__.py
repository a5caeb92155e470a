"""
Test suite for fluent-builders

Contains:
- tests/unit/          : Unit tests for individual modules
"""
