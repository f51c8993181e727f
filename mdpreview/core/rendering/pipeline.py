"""
Render Pipeline
===============

Markdown bytes in, complete HTML document bytes out:
render -> sanitize -> template.
"""

from typing import Any, Optional, Union
from pathlib import Path

from mdpreview.config.logging import get_logger
from mdpreview.config.settings import Settings, get_settings
from mdpreview.core.rendering.html_generator import (
    DEFAULT_TEMPLATE,
    BaseTemplateEngine,
    Jinja2TemplateEngine,
)
from mdpreview.core.rendering.markdown_renderer import HTMLSanitizer, MarkdownRenderer
from mdpreview.models.schemas import DocumentContent, TemplateReference

logger = get_logger(__name__)


class RenderPipeline:
    """Orchestrates the Markdown renderer, the sanitizer and the template engine."""

    def __init__(
        self,
        title: str = "Markdown Preview Tool",
        default_template: str = DEFAULT_TEMPLATE,
        renderer: Optional[MarkdownRenderer] = None,
        sanitizer: Optional[HTMLSanitizer] = None,
        engine: Optional[BaseTemplateEngine] = None,
    ) -> None:
        self.title = title
        self.renderer = renderer or MarkdownRenderer()
        self.sanitizer = sanitizer or HTMLSanitizer()
        self.engine = engine or Jinja2TemplateEngine(default_template)
        self.logger: Any = logger.bind(component="render_pipeline")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "RenderPipeline":
        """Build a pipeline configured from application settings."""
        settings = settings or get_settings()
        return cls(
            title=settings.app_name,
            renderer=MarkdownRenderer(settings.markdown_extensions),
        )

    def render(
        self,
        markup: bytes,
        template_ref: Union[TemplateReference, str, Path, None] = None,
        display_name: str = "",
    ) -> bytes:
        """
        Produce a complete HTML document from Markdown.

        Args:
            markup: Markdown source bytes
            template_ref: Template reference or path; empty selects the default
            display_name: File name shown by the template

        Returns:
            UTF-8 encoded HTML document

        Raises:
            RenderError: If rendering or sanitization fails
            TemplateError: If the template cannot be loaded or parsed
            TemplateExecutionError: If the template fails while rendering
        """
        if not isinstance(template_ref, TemplateReference):
            template_ref = TemplateReference.from_value(template_ref)

        raw_html = self.renderer.render(markup)
        body = self.sanitizer.sanitize(raw_html)

        template = self.engine.load(template_ref)
        content = DocumentContent(title=self.title, file_name=display_name, body=body)
        document = self.engine.execute(template, content)

        self.logger.info(
            "Document rendered",
            file_name=display_name,
            template="default" if template_ref.is_default else str(template_ref.path),
            document_length=len(document),
        )
        return document.encode("utf-8")
