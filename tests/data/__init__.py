"""
Test Data Package
================

Sample Markdown documents, including adversarial inputs for sanitization.
"""

from .sample_markdown_documents import (
    SIMPLE_HEADING,
    FULL_DOCUMENT,
    SCRIPT_INJECTION,
    EVENT_HANDLER_INJECTION,
    STYLE_INJECTION,
    ADVERSARIAL_DOCUMENTS,
)

__all__ = [
    'SIMPLE_HEADING',
    'FULL_DOCUMENT',
    'SCRIPT_INJECTION',
    'EVENT_HANDLER_INJECTION',
    'STYLE_INJECTION',
    'ADVERSARIAL_DOCUMENTS',
]
