"""
Data Models
===========

Pydantic models for document content, template references and staged files.
"""
