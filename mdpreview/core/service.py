"""
Preview Service
===============

End-to-end preview generation: read the Markdown file, render it, stage the
document and optionally open it in the default viewer.
"""

from typing import Any, Optional, TextIO, Union
from pathlib import Path
import sys

from mdpreview.config.logging import get_logger
from mdpreview.config.settings import Settings, get_settings
from mdpreview.core.exceptions import InputReadError
from mdpreview.core.preview.launcher import PreviewLauncher
from mdpreview.core.rendering.pipeline import RenderPipeline
from mdpreview.core.staging.store import StagingStore
from mdpreview.models.schemas import TemplateReference

logger = get_logger(__name__)


class PreviewService:
    """Wires the render pipeline, staging store and preview launcher together."""

    def __init__(
        self,
        pipeline: Optional[RenderPipeline] = None,
        store: Optional[StagingStore] = None,
        launcher: Optional[PreviewLauncher] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.pipeline = pipeline or RenderPipeline()
        self.store = store or StagingStore()
        self.launcher = launcher or PreviewLauncher()
        self.out = out
        self.logger: Any = logger.bind(component="preview_service")

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, out: Optional[TextIO] = None
    ) -> "PreviewService":
        """Build a service whose components are configured from settings."""
        settings = settings or get_settings()
        return cls(
            pipeline=RenderPipeline.from_settings(settings),
            store=StagingStore.from_settings(settings),
            launcher=PreviewLauncher.from_settings(settings),
            out=out,
        )

    def generate_preview(
        self,
        filename: Union[str, Path],
        template_ref: Union[TemplateReference, str, Path, None] = None,
        skip_preview: bool = False,
    ) -> Path:
        """
        Render ``filename`` to a staged HTML file and preview it.

        The staged path is written to the output stream before any preview
        attempt. With ``skip_preview`` the file is kept and becomes the
        caller's; otherwise it is deleted once the preview attempt finishes,
        whether or not it succeeded.

        Args:
            filename: Markdown file to render
            template_ref: Alternate template; empty selects the default
            skip_preview: Stage the file without opening a viewer

        Returns:
            Path of the staged file

        Raises:
            PreviewToolError: Any failure of the individual stages
        """
        try:
            markup = Path(filename).read_bytes()
        except OSError as e:
            self.logger.error("Failed to read input", filename=str(filename), error=str(e))
            raise InputReadError(f"Failed to read {filename}: {e}") from e

        document = self.pipeline.render(markup, template_ref, str(filename))
        artifact = self.store.stage(document)

        out = self.out if self.out is not None else sys.stdout
        print(artifact.path, file=out)
        out.flush()

        if skip_preview:
            self.logger.info("Preview skipped", path=str(artifact.path))
            return artifact.path

        with self.store.scoped(artifact.path):
            self.launcher.preview(artifact.path)

        return artifact.path


def generate_preview(
    filename: Union[str, Path],
    template_ref: Union[TemplateReference, str, Path, None] = None,
    skip_preview: bool = False,
    out: Optional[TextIO] = None,
) -> Path:
    """
    Generate a preview using the application settings.

    Args:
        filename: Markdown file to render
        template_ref: Alternate template; empty selects the default
        skip_preview: Stage the file without opening a viewer
        out: Stream receiving the staged path, stdout by default

    Returns:
        Path of the staged file
    """
    service = PreviewService.from_settings(out=out)
    return service.generate_preview(filename, template_ref, skip_preview)
