"""
Preview Launcher
================

Open a staged file with the operating system's default viewer.

Viewer launchers usually return as soon as they hand the file to a running
application, so the launcher waits a fixed grace delay after the viewer
process exits. The staged file is deleted by the caller only after that.
"""

from typing import Any, Dict, Optional, Union
from pathlib import Path
import shutil
import subprocess
import time

from mdpreview.config.logging import get_logger
from mdpreview.config.settings import Settings, get_settings
from mdpreview.core.exceptions import (
    ExecutableNotFoundError,
    LaunchError,
    UnsupportedPlatformError,
)
from mdpreview.models.schemas import LaunchCommand, Platform

logger = get_logger(__name__)


# ``start`` takes its first quoted argument as the window title.
LAUNCH_COMMANDS: Dict[Platform, LaunchCommand] = {
    Platform.WINDOWS: LaunchCommand(command="cmd.exe", args=("/C", "start", "")),
    Platform.LINUX: LaunchCommand(command="xdg-open"),
    Platform.MACOS: LaunchCommand(command="open"),
}

DEFAULT_GRACE_DELAY = 2.0


class PreviewLauncher:
    """Launches the platform default viewer against a file."""

    def __init__(
        self,
        platform: Optional[Platform] = None,
        grace_delay: float = DEFAULT_GRACE_DELAY,
    ) -> None:
        self.platform = platform if platform is not None else Platform.detect()
        self.grace_delay = grace_delay
        self.logger: Any = logger.bind(component="preview_launcher", platform=self.platform.value)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "PreviewLauncher":
        """Build a launcher configured from application settings."""
        settings = settings or get_settings()
        return cls(grace_delay=settings.preview_grace_delay)

    def select(self) -> LaunchCommand:
        """
        Pick the viewer command for the host platform.

        Raises:
            UnsupportedPlatformError: If the platform has no known viewer
        """
        command = LAUNCH_COMMANDS.get(self.platform)
        if command is None:
            raise UnsupportedPlatformError(f"OS not supported: {self.platform.value}")
        return command

    def resolve(self, command: LaunchCommand) -> str:
        """
        Locate the viewer executable on PATH.

        Raises:
            ExecutableNotFoundError: If the executable cannot be found
        """
        executable = shutil.which(command.command)
        if executable is None:
            raise ExecutableNotFoundError(
                f"executable file not found in PATH: {command.command}"
            )
        return executable

    def preview(self, path: Union[str, Path]) -> None:
        """
        Open ``path`` in the default viewer and wait for the grace delay.

        The grace delay elapses whenever a viewer process was started,
        including when it failed.

        Raises:
            UnsupportedPlatformError: No viewer for this platform; nothing spawned
            ExecutableNotFoundError: Viewer not on PATH; nothing spawned
            LaunchError: The viewer process could not run or exited non-zero
        """
        command = self.select()
        executable = self.resolve(command)
        argv = command.argv(executable, path)

        self.logger.info("Launching viewer", argv=argv)
        try:
            subprocess.run(argv, check=True)
        except subprocess.CalledProcessError as e:
            self.logger.error("Viewer exited with an error", returncode=e.returncode)
            raise LaunchError(f"{command.command} exited with status {e.returncode}") from e
        except OSError as e:
            self.logger.error("Viewer could not be started", error=str(e))
            raise LaunchError(f"Failed to start {command.command}: {e}") from e
        finally:
            time.sleep(self.grace_delay)
