"""
Preview Module
==============

Open staged files in the operating system's default viewer.
"""
