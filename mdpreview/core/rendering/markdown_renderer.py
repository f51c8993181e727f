"""
Markdown Renderer
=================

Convert Markdown to HTML and sanitize the result for embedding in a page.
Rendering uses Python-Markdown; sanitization uses bleach with an allow list
suited to user-generated content.
"""

import re
from typing import Any, Iterable, List, Optional

import bleach
import markdown
from markupsafe import Markup

from mdpreview.config.logging import get_logger
from mdpreview.config.settings import DEFAULT_MARKDOWN_EXTENSIONS
from mdpreview.core.exceptions import RenderError

logger = get_logger(__name__)


ALLOWED_TAGS = frozenset(bleach.sanitizer.ALLOWED_TAGS).union(
    {
        "p",
        "br",
        "hr",
        "div",
        "span",
        "pre",
        "code",
        "kbd",
        "samp",
        "sub",
        "sup",
        "del",
        "ins",
        "s",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "table",
        "thead",
        "tbody",
        "tfoot",
        "tr",
        "th",
        "td",
        "caption",
        "dl",
        "dt",
        "dd",
        "img",
    }
)

ALLOWED_ATTRIBUTES = {
    **bleach.sanitizer.ALLOWED_ATTRIBUTES,
    "a": ["href", "title", "rel"],
    "img": ["src", "alt", "title", "width", "height"],
    "code": ["class"],
    "th": ["align"],
    "td": ["align"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

# Raw-text elements whose contents would otherwise survive as visible text.
# An unclosed element runs to the end of the fragment, as the HTML parser reads it.
RAW_TEXT_ELEMENTS = re.compile(
    r"<(script|style)\b[^>]*>.*?(?:</\1\s*>|\Z)", flags=re.IGNORECASE | re.DOTALL
)


class MarkdownRenderer:
    """Python-Markdown based renderer."""

    def __init__(self, extensions: Optional[Iterable[str]] = None) -> None:
        self.extensions: List[str] = list(
            extensions if extensions is not None else DEFAULT_MARKDOWN_EXTENSIONS
        )
        self.logger: Any = logger.bind(component="markdown_renderer")

    def render(self, markup: bytes) -> str:
        """
        Convert Markdown bytes to raw HTML.

        Args:
            markup: UTF-8 encoded Markdown; undecodable bytes are replaced

        Returns:
            Unsanitized HTML fragment

        Raises:
            RenderError: If the Markdown library fails
        """
        text = markup.decode("utf-8", errors="replace")
        try:
            html = markdown.markdown(text, extensions=self.extensions, output_format="html")
        except Exception as e:
            self.logger.error("Markdown rendering failed", error=str(e))
            raise RenderError(f"Markdown rendering failed: {e}") from e

        self.logger.debug("Markdown rendered", input_length=len(markup), html_length=len(html))
        return html


class HTMLSanitizer:
    """bleach based sanitizer that strips disallowed tags and attributes."""

    def __init__(
        self,
        tags: Iterable[str] = ALLOWED_TAGS,
        attributes: Optional[dict] = None,
        protocols: Iterable[str] = ALLOWED_PROTOCOLS,
    ) -> None:
        self.tags = frozenset(tags)
        self.attributes = attributes if attributes is not None else ALLOWED_ATTRIBUTES
        self.protocols = frozenset(protocols)
        self.logger: Any = logger.bind(component="html_sanitizer")

    def sanitize(self, html: str) -> Markup:
        """
        Strip unsafe constructs from an HTML fragment.

        Script and style elements are dropped with their contents; other
        disallowed tags are stripped and their text kept.

        Returns:
            The cleaned fragment marked as trusted markup

        Raises:
            RenderError: If bleach fails
        """
        html = RAW_TEXT_ELEMENTS.sub("", html)
        try:
            cleaned = bleach.clean(
                html,
                tags=self.tags,
                attributes=self.attributes,
                protocols=self.protocols,
                strip=True,
                strip_comments=True,
            )
        except Exception as e:
            self.logger.error("HTML sanitization failed", error=str(e))
            raise RenderError(f"HTML sanitization failed: {e}") from e

        return Markup(cleaned)
