"""Test suite for Image Tag Policy.

This package contains test modules and fixtures for verifying the functionality
of the Image Tag Policy tool. It includes tests for:
- Pattern parsing, matching and serialization
- Semantic version constraints
- Ranking of matching images
- Policy file loading and configuration handling

The test suite uses pytest and provides fixtures for common test scenarios.
"""
