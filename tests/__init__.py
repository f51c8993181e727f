"""
Test Suite
==========

Test suite matching the mdpreview/ package structure.

Test Categories:
- unit: Unit tests for individual components
- integration: End-to-end preview runs with the viewer mocked
"""
