"""
Staging Store
=============

Temporary HTML file management. Each staged file gets a unique name in the
temporary directory so concurrent invocations never collide.
"""

from typing import Any, Iterator, Optional, Union
from contextlib import contextmanager
from pathlib import Path
import os
import tempfile

from mdpreview.config.logging import get_logger
from mdpreview.config.settings import Settings, get_settings
from mdpreview.core.exceptions import StagingError
from mdpreview.models.schemas import StagedArtifact

logger = get_logger(__name__)


class StagingStore:
    """Creates, writes and releases staged HTML files."""

    def __init__(
        self,
        directory: Optional[Union[str, Path]] = None,
        prefix: str = "mdp",
        suffix: str = ".html",
    ) -> None:
        self.directory = Path(directory) if directory is not None else None
        self.prefix = prefix
        self.suffix = suffix
        self.logger: Any = logger.bind(component="staging_store")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "StagingStore":
        """Build a store configured from application settings."""
        settings = settings or get_settings()
        return cls(
            directory=settings.temp_dir,
            prefix=settings.temp_prefix,
            suffix=settings.temp_suffix,
        )

    def create(self) -> Path:
        """
        Create an empty, uniquely named file and close it.

        Returns:
            Absolute path of the new file

        Raises:
            StagingError: If the directory is not writable
        """
        try:
            fd, name = tempfile.mkstemp(
                suffix=self.suffix,
                prefix=self.prefix,
                dir=str(self.directory) if self.directory is not None else None,
            )
            os.close(fd)
        except OSError as e:
            self.logger.error("Failed to create staged file", error=str(e))
            raise StagingError(f"Failed to create temporary file: {e}") from e

        return Path(name).resolve()

    def write(self, path: Path, document: bytes) -> None:
        """
        Replace the contents of ``path`` with ``document``.

        Raises:
            StagingError: If the write fails
        """
        try:
            path.write_bytes(document)
        except OSError as e:
            self.logger.error("Failed to write staged file", path=str(path), error=str(e))
            raise StagingError(f"Failed to write {path}: {e}") from e

    def stage(self, document: bytes) -> StagedArtifact:
        """
        Write a document to a new temporary file.

        Args:
            document: Complete HTML document

        Returns:
            The staged artifact; the caller owns its deletion

        Raises:
            StagingError: If the file cannot be created or written
        """
        path = self.create()
        try:
            self.write(path, document)
        except StagingError:
            self.release(path)
            raise

        self.logger.info("Document staged", path=str(path), size=len(document))
        return StagedArtifact(path=path, size=len(document))

    def release(self, path: Path) -> None:
        """Delete a staged file; a missing file is ignored."""
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            self.logger.warning("Failed to delete staged file", path=str(path), error=str(e))
            return
        self.logger.debug("Staged file released", path=str(path))

    @contextmanager
    def scoped(self, path: Path) -> Iterator[Path]:
        """Yield ``path`` and delete it on every exit path of the block."""
        try:
            yield path
        finally:
            self.release(path)
