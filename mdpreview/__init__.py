"""
Markdown Preview Tool
=====================

Render a Markdown file to a sanitized, self-contained HTML page and open it
in the operating system's default viewer.

This package provides:
- Markdown rendering and HTML sanitization
- Jinja2 page templates (built-in default or user supplied)
- Temporary file staging with scoped cleanup
- Cross-platform preview launching
"""

__version__ = "1.0.0"
__author__ = "Markdown Preview Team"
