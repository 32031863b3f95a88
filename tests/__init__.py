"""
Test suite for bigarith

Contains:
- tests/unit/          : Unit tests for individual modules
"""
