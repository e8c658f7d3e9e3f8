"""Package manager invocation for production-only reinstalls."""

import logging
import subprocess
from typing import List, Optional

from ..exceptions import InstallError


DEFAULT_INSTALL_COMMAND = ['npm', 'install', '--omit=dev']


class PackageInstaller:
    """Reinstalls a project's dependencies without development packages."""

    def __init__(self, project_dir: str, command: Optional[List[str]] = None,
                 timeout_seconds: int = 900):
        """Initialize package installer.

        Args:
            project_dir: Directory the install command runs in.
            command: Install command and arguments.
            timeout_seconds: Maximum time allowed for the install.
        """
        self.project_dir = project_dir
        self.command = list(command or DEFAULT_INSTALL_COMMAND)
        self.timeout_seconds = timeout_seconds
        self.logger = logging.getLogger(__name__)

    def install(self) -> str:
        """Run the install command and wait for it to finish.

        Returns:
            Command output (stdout, or stderr when stdout is empty).

        Raises:
            InstallError: If the command cannot be started, times out or
                exits with a nonzero status.
        """
        self.logger.info(f"Running {' '.join(self.command)} in {self.project_dir}")

        try:
            result = subprocess.run(self.command, cwd=self.project_dir, capture_output=True,
                                    text=True, timeout=self.timeout_seconds)
        except subprocess.TimeoutExpired:
            raise InstallError(f"Install command timed out after {self.timeout_seconds}s")
        except OSError as e:
            raise InstallError(f"Could not run install command {self.command[0]}: {e}")

        if result.returncode != 0:
            self.logger.error(f"Install failed with return code {result.returncode}: {result.stderr}")
            raise InstallError(
                f"Install command exited with code {result.returncode}: {result.stderr.strip()}"
            )

        self.logger.info("Dependencies installed in production mode")
        return result.stdout if result.stdout else result.stderr
