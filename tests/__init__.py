"""
Test suite for dendro

Contains:
- tests/unit/          : Unit tests for individual modules
"""
