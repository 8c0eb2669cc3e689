"""
Test suite for traversal ordering strategies

Contains:
- tests/unit/          : Unit tests for individual modules
"""
