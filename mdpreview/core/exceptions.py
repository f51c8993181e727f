"""
Error Types
===========

Exception hierarchy shared by the rendering, staging and preview components.
Every failure reaching the command line is a PreviewToolError.
"""


class PreviewToolError(Exception):
    """Base exception for all preview tool failures."""

    pass


class InputReadError(PreviewToolError):
    """Exception raised when the Markdown input file cannot be read."""

    pass


class RenderError(PreviewToolError):
    """Exception raised when Markdown rendering or sanitization fails."""

    pass


class TemplateError(PreviewToolError):
    """Exception raised when a page template cannot be loaded or parsed."""

    pass


class TemplateExecutionError(TemplateError):
    """Exception raised when a parsed template fails while rendering."""

    pass


class StagingError(PreviewToolError):
    """Exception raised when the temporary HTML file cannot be created or written."""

    pass


class PreviewError(PreviewToolError):
    """Base exception for default-viewer launch failures."""

    pass


class UnsupportedPlatformError(PreviewError):
    """Exception raised when no viewer command is known for the host platform."""

    pass


class ExecutableNotFoundError(PreviewError):
    """Exception raised when the viewer command is not on the search path."""

    pass


class LaunchError(PreviewError):
    """Exception raised when the viewer process fails to run."""

    pass
