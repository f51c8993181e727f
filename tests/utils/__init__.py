"""
Test Utilities
==============

Common assertions for testing.
"""

from .assertions import *
