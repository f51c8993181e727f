"""
Rendering Module
===============

Markdown to HTML conversion and page assembly.

Components:
- markdown_renderer: Convert Markdown to HTML and sanitize the result
- html_generator: Jinja2 page template management
- pipeline: Render, sanitize and template in one pass
"""
