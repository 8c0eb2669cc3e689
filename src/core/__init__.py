"""
Core value types, numeric primitives, and operand contracts.

This module contains the building blocks the ordering strategies rely on;
it is independent of any traversal engine.
"""
