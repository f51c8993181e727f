"""
Pydantic Models and Schemas
===========================

Core data models for document content, template references, staged files
and viewer launch commands.
"""

from typing import Optional, Tuple, List, Union
from enum import Enum
from pathlib import Path
import sys

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, Field


# Enums
class Platform(str, Enum):
    """Host platforms with a known default-viewer command."""
    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"
    UNSUPPORTED = "unsupported"

    @classmethod
    def detect(cls, platform: Optional[str] = None) -> "Platform":
        """Map a ``sys.platform`` identifier to a Platform."""
        platform = platform if platform is not None else sys.platform
        if platform in ("win32", "cygwin"):
            return cls.WINDOWS
        if platform.startswith("linux"):
            return cls.LINUX
        if platform == "darwin":
            return cls.MACOS
        return cls.UNSUPPORTED


# Document Models
class DocumentContent(BaseModel):
    """Values substituted into a page template.

    ``body`` only accepts :class:`markupsafe.Markup`, the marker for HTML that
    has already been sanitized. Templates insert it verbatim while ``title``
    and ``file_name`` are escaped.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    title: str = Field(..., description="Page title")
    file_name: str = Field(..., description="Source path or logical name of the document")
    body: Markup = Field(..., description="Sanitized HTML body")

    def template_context(self) -> dict:
        """Template variables for this content."""
        return {"title": self.title, "file_name": self.file_name, "body": self.body}


class TemplateReference(BaseModel):
    """Built-in default template or a path to a user template file."""
    model_config = ConfigDict(frozen=True)

    path: Optional[Path] = Field(None, description="User template file, None for the default")

    @property
    def is_default(self) -> bool:
        return self.path is None

    @classmethod
    def from_value(cls, value: Union[str, Path, None]) -> "TemplateReference":
        """Build a reference from a command-line value; empty means default."""
        if value is None or str(value) == "":
            return cls()
        return cls(path=Path(value))


# Staging Models
class StagedArtifact(BaseModel):
    """A temporary HTML file written by the staging store."""
    model_config = ConfigDict(frozen=True)

    path: Path = Field(..., description="Absolute path of the staged file")
    size: int = Field(..., ge=0, description="Number of bytes written")


# Preview Models
class LaunchCommand(BaseModel):
    """Viewer command and the arguments placed before the file path."""
    model_config = ConfigDict(frozen=True)

    command: str = Field(..., description="Executable name looked up on PATH")
    args: Tuple[str, ...] = Field(default=(), description="Arguments preceding the path")

    def argv(self, executable: str, path: Union[str, Path]) -> List[str]:
        """Full argument vector for the resolved executable."""
        return [executable, *self.args, str(path)]
