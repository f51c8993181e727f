"""
HTML Generator
==============

Page template management for rendered Markdown.
Templates are Jinja2 documents with the variables ``title``, ``file_name``
and ``body``; ``body`` is inserted verbatim, everything else is escaped.
"""

from typing import Any
from pathlib import Path
import jinja2
from abc import ABC, abstractmethod

from mdpreview.config.logging import get_logger
from mdpreview.core.exceptions import TemplateError, TemplateExecutionError
from mdpreview.models.schemas import DocumentContent, TemplateReference

logger = get_logger(__name__)


DEFAULT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta http-equiv="content-type" content="text/html; charset=utf-8">
    <title>Markdown Preview Tool</title>
</head>
<body>
Previewing: {{ file_name }}
{{ body }}
</body>
</html>
"""


class BaseTemplateEngine(ABC):
    """Abstract base class for page template engines."""

    @abstractmethod
    def load(self, reference: TemplateReference) -> Any:
        """Load and parse the referenced template."""
        pass

    @abstractmethod
    def execute(self, template: Any, content: DocumentContent) -> str:
        """Render a parsed template with document content."""
        pass


class Jinja2TemplateEngine(BaseTemplateEngine):
    """Jinja2-based template engine implementation."""

    def __init__(self, default_template: str = DEFAULT_TEMPLATE) -> None:
        self.default_template = default_template
        self.logger: Any = logger.bind(component="template_engine")

    def _create_environment(self, loader: Any = None) -> jinja2.Environment:
        """Create a Jinja2 environment that escapes everything except Markup."""
        return jinja2.Environment(
            loader=loader,
            autoescape=jinja2.select_autoescape(default_for_string=True, default=True),
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
        )

    def load(self, reference: TemplateReference) -> jinja2.Template:
        """
        Load and parse the referenced template.

        Args:
            reference: Built-in default or a template file path

        Returns:
            Parsed template

        Raises:
            TemplateError: If the file is missing, unreadable or not valid Jinja2
        """
        try:
            if reference.is_default:
                return self._create_environment().from_string(self.default_template)

            path = reference.path
            env = self._create_environment(
                jinja2.FileSystemLoader(str(path.parent.resolve()))
            )
            template = env.get_template(path.name)
        except jinja2.TemplateNotFound as e:
            error_msg = f"Template not found: {reference.path}"
            self.logger.error("Template loading failed", error=error_msg)
            raise TemplateError(error_msg) from e
        except jinja2.TemplateSyntaxError as e:
            error_msg = f"Template syntax error in {e.filename or 'default template'}:{e.lineno}: {e.message}"
            self.logger.error("Template loading failed", error=error_msg)
            raise TemplateError(error_msg) from e
        except (jinja2.TemplateError, OSError, UnicodeDecodeError) as e:
            error_msg = f"Template loading failed: {e}"
            self.logger.error("Template loading failed", error=error_msg)
            raise TemplateError(error_msg) from e

        self.logger.debug("Template loaded", template=str(reference.path))
        return template

    def execute(self, template: jinja2.Template, content: DocumentContent) -> str:
        """
        Render a parsed template with document content.

        Raises:
            TemplateExecutionError: If rendering fails, including references
                to variables the content does not provide
        """
        try:
            html = template.render(**content.template_context())
        except jinja2.TemplateError as e:
            error_msg = f"Template rendering failed: {e}"
            self.logger.error("Template execution failed", error=error_msg)
            raise TemplateExecutionError(error_msg) from e
        except Exception as e:
            error_msg = f"Unexpected template rendering error: {e}"
            self.logger.error("Template execution failed", error=error_msg)
            raise TemplateExecutionError(error_msg) from e

        self.logger.debug("Template executed", html_length=len(html))
        return html
