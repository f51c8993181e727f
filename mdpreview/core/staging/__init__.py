"""
Staging Module
==============

Temporary HTML file creation, writing and scoped deletion.
"""
