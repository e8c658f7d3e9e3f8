"""Main dependency shrinking coordinator."""

import logging
import os
import shutil
from typing import Optional

from .compressors import JsCompressor, JsonCompressor
from .installer import PackageInstaller
from .minifier import TerserMinifier
from .models import RunStatistics
from .walker import TreeWalker
from ..config.config_manager import ConfigManager
from ..exceptions import ShrinkError


class DependencyShrinker:
    """Reinstalls production dependencies and shrinks the resulting tree."""

    def __init__(self, config_path: Optional[str] = None, project_dir: Optional[str] = None,
                 modules_dir: Optional[str] = None):
        """Initialize dependency shrinker.

        Args:
            config_path: Optional path to configuration file.
            project_dir: Project directory, overriding the configured one.
            modules_dir: Dependency directory name or path relative to the
                project, overriding the configured one.
        """
        self.config_manager = ConfigManager(config_path)
        self.config = self.config_manager.load_config()
        self.logger = logging.getLogger(__name__)

        target_config = self.config_manager.get_target_config()
        self.project_dir = project_dir or target_config['project_dir']
        self.target_dir = os.path.join(self.project_dir, modules_dir or target_config['modules_dir'])

        self.installer = None
        self.minifier = None
        self.walker = None

        # Initialize components
        self._initialize_components()

    def _initialize_components(self):
        """Initialize shrinking components."""
        installer_config = self.config_manager.get_installer_config()
        self.installer = PackageInstaller(
            project_dir=self.project_dir,
            command=installer_config['command'],
            timeout_seconds=installer_config['timeout_seconds']
        )

        minifier_config = self.config_manager.get_minifier_config()
        self.minifier = TerserMinifier(
            command=minifier_config['command'],
            ecma=minifier_config['ecma'],
            timeout_seconds=minifier_config['timeout_seconds']
        )

        self.walker = TreeWalker(
            js_compressor=JsCompressor(self.minifier),
            json_compressor=JsonCompressor()
        )

    def run(self) -> RunStatistics:
        """Remove the dependency tree, reinstall it for production and shrink it.

        Returns:
            Statistics for the shrink walk.

        Raises:
            ShrinkError: If the dependency directory cannot be removed.
            InstallError: If the reinstall fails.
        """
        self.logger.info(f"Starting full shrink of {self.target_dir}")

        self.remove_target()
        self.installer.install()

        if not os.path.isdir(self.target_dir):
            self.logger.info(f"Install created no {self.target_dir}, nothing to shrink")
            return RunStatistics()

        return self.shrink()

    def remove_target(self):
        """Remove the dependency directory recursively.

        Raises:
            ShrinkError: If removal fails.
        """
        if not os.path.lexists(self.target_dir):
            self.logger.info(f"{self.target_dir} does not exist, nothing to remove")
            return

        try:
            shutil.rmtree(self.target_dir)
        except OSError as e:
            self.logger.error(f"Failed to remove {self.target_dir}: {e}")
            raise ShrinkError(f"Could not remove {self.target_dir}: {e}")

        self.logger.info(f"Deleted folder {self.target_dir}")

    def shrink(self) -> RunStatistics:
        """Walk the installed dependency tree without reinstalling.

        Returns:
            Statistics for the walk.
        """
        if not self.minifier.is_available():
            self.logger.warning(
                f"Minifier '{self.minifier.command[0]}' not found, JavaScript files will fail to compress"
            )

        stats = RunStatistics()
        self.walker.walk(self.target_dir, stats)

        self.logger.info("Shrink completed")
        return stats
