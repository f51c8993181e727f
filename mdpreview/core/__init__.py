"""
Core Business Logic
==================

Core business logic modules for Markdown preview generation.

Modules:
- rendering: Markdown rendering, sanitization and page templates
- staging: Temporary file management with scoped cleanup
- preview: Default-viewer launching per operating system
- service: End-to-end preview orchestration
"""
