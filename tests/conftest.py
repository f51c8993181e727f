"""
Test Configuration
==================

Pytest configuration with fixtures for all test types.
Provides test settings, an isolated staging directory and sample documents.
"""

import shutil
import tempfile
import pytest
from pathlib import Path
from typing import Generator
from unittest.mock import patch

from pydantic_settings import SettingsConfigDict

import mdpreview.config.settings as settings_module
from mdpreview.config.settings import Settings
from mdpreview.config.logging import setup_logging
from mdpreview.core.preview.launcher import PreviewLauncher
from mdpreview.core.rendering.pipeline import RenderPipeline
from mdpreview.core.service import PreviewService
from mdpreview.core.staging.store import StagingStore
from mdpreview.models.schemas import Platform

from tests.data.sample_markdown_documents import SIMPLE_HEADING, FULL_DOCUMENT


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    log_level: str = "DEBUG"
    preview_grace_delay: float = 0.0

    model_config = SettingsConfigDict(env_file=".env.test")


@pytest.fixture(scope="session")
def test_settings() -> Generator[TestSettings, None, None]:
    """Test settings fixture with a private staging directory."""
    temp_dir = Path(tempfile.mkdtemp(prefix="mdpreview_test_"))
    yield TestSettings(temp_dir=temp_dir)
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(scope="session", autouse=True)
def override_settings(test_settings: TestSettings):
    """Override application settings for testing."""
    previous = settings_module.settings
    settings_module.settings = test_settings
    setup_logging(test_settings)
    yield test_settings
    settings_module.settings = previous


@pytest.fixture
def staging_dir(tmp_path: Path) -> Path:
    """Staging directory private to one test."""
    directory = tmp_path / "staging"
    directory.mkdir()
    return directory


@pytest.fixture
def store(staging_dir: Path) -> StagingStore:
    """Staging store writing into the per-test directory."""
    return StagingStore(directory=staging_dir)


@pytest.fixture
def pipeline() -> RenderPipeline:
    """Render pipeline with default components."""
    return RenderPipeline()


@pytest.fixture
def linux_launcher() -> PreviewLauncher:
    """Launcher pinned to Linux without a grace delay."""
    return PreviewLauncher(platform=Platform.LINUX, grace_delay=0.0)


@pytest.fixture
def markdown_file(tmp_path: Path) -> Path:
    """Markdown file with a single heading."""
    path = tmp_path / "README.md"
    path.write_text(SIMPLE_HEADING, encoding="utf-8")
    return path


@pytest.fixture
def full_markdown_file(tmp_path: Path) -> Path:
    """Markdown file exercising most supported syntax."""
    path = tmp_path / "guide.md"
    path.write_text(FULL_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def mock_which():
    """Pretend every viewer executable is on PATH."""
    with patch(
        "mdpreview.core.preview.launcher.shutil.which",
        side_effect=lambda name: f"/usr/bin/{name}",
    ) as mock:
        yield mock


@pytest.fixture
def mock_run():
    """Replace subprocess.run in the launcher."""
    with patch("mdpreview.core.preview.launcher.subprocess.run") as mock:
        yield mock


@pytest.fixture
def mock_sleep():
    """Replace time.sleep in the launcher."""
    with patch("mdpreview.core.preview.launcher.time.sleep") as mock:
        yield mock
