"""
Unit Tests for Preview Service
==============================

Unit tests for reading, staging, previewing and cleaning up.
"""

import io
import pytest
from pathlib import Path
from unittest.mock import Mock

from mdpreview.core.exceptions import (
    InputReadError, LaunchError, TemplateError, UnsupportedPlatformError
)
from mdpreview.core.preview.launcher import PreviewLauncher
from mdpreview.core.service import PreviewService, generate_preview
from mdpreview.models.schemas import Platform


class TestPreviewService:
    """Test preview orchestration."""

    @pytest.fixture
    def launcher(self):
        """Launcher double recording the file state during preview."""
        launcher = Mock(spec=PreviewLauncher)
        launcher.seen = []
        launcher.preview.side_effect = lambda path: launcher.seen.append(
            (path, path.exists())
        )
        return launcher

    @pytest.fixture
    def out(self):
        """Output stream receiving the staged path."""
        return io.StringIO()

    @pytest.fixture
    def service(self, pipeline, store, launcher, out):
        """Service wired with test components."""
        return PreviewService(pipeline=pipeline, store=store, launcher=launcher, out=out)

    def test_skip_preview_keeps_file(self, service, launcher, out, markdown_file):
        """Test skipped previews leave the staged file in place."""
        path = service.generate_preview(markdown_file, skip_preview=True)

        assert path.exists()
        assert path.suffix == ".html"
        assert out.getvalue() == f"{path}\n"
        assert "<h1>Hello</h1>" in path.read_text(encoding="utf-8")
        launcher.preview.assert_not_called()

    def test_preview_deletes_file(self, service, launcher, out, markdown_file):
        """Test the staged file exists during preview and is removed afterwards."""
        path = service.generate_preview(markdown_file)

        assert launcher.seen == [(path, True)]
        assert not path.exists()
        assert out.getvalue() == f"{path}\n"

    def test_preview_failure_deletes_file(self, service, launcher, out, markdown_file):
        """Test the staged file is removed when the viewer fails."""
        launcher.preview.side_effect = LaunchError("viewer crashed")

        with pytest.raises(LaunchError):
            service.generate_preview(markdown_file)

        staged = Path(out.getvalue().strip())
        assert staged.suffix == ".html"
        assert not staged.exists()

    def test_unsupported_platform_deletes_file(self, pipeline, store, out, markdown_file):
        """Test unsupported hosts still report the path and clean up."""
        launcher = PreviewLauncher(platform=Platform.UNSUPPORTED, grace_delay=0.0)
        service = PreviewService(pipeline=pipeline, store=store, launcher=launcher, out=out)

        with pytest.raises(UnsupportedPlatformError):
            service.generate_preview(markdown_file)

        staged = Path(out.getvalue().strip())
        assert not staged.exists()

    def test_missing_input(self, service, out, store, staging_dir, tmp_path):
        """Test unreadable input aborts before staging."""
        with pytest.raises(InputReadError):
            service.generate_preview(tmp_path / "missing.md")

        assert out.getvalue() == ""
        assert list(staging_dir.iterdir()) == []

    def test_template_error_stages_nothing(self, service, out, staging_dir, markdown_file, tmp_path):
        """Test render failures never reach the staging store."""
        with pytest.raises(TemplateError):
            service.generate_preview(markdown_file, tmp_path / "missing.html")

        assert out.getvalue() == ""
        assert list(staging_dir.iterdir()) == []

    def test_display_name_is_given_filename(self, service, markdown_file):
        """Test the template shows the file name as supplied."""
        path = service.generate_preview(str(markdown_file), skip_preview=True)
        assert f"Previewing: {markdown_file}" in path.read_text(encoding="utf-8")

    def test_custom_template(self, service, markdown_file, tmp_path):
        """Test an alternate template is used when given."""
        template = tmp_path / "alt.html"
        template.write_text("<main>{{ body }}</main>", encoding="utf-8")

        path = service.generate_preview(markdown_file, str(template), skip_preview=True)
        assert path.read_text(encoding="utf-8") == "<main><h1>Hello</h1></main>"


class TestGeneratePreview:
    """Test the settings-driven convenience function."""

    def test_uses_configured_staging_directory(self, test_settings, markdown_file):
        """Test the module-level function stages into the configured directory."""
        out = io.StringIO()
        path = generate_preview(markdown_file, skip_preview=True, out=out)
        try:
            assert path.parent == test_settings.temp_dir.resolve()
            assert out.getvalue() == f"{path}\n"
        finally:
            path.unlink()
