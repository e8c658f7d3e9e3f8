"""JavaScript minification through the terser command line tool."""

import logging
import shutil
import subprocess
from typing import List, Optional

from ..exceptions import MinifierError


DEFAULT_COMMAND = ['terser']

# Mangle locals, keep declarations in place, treat the input as top-level module scope.
COMPRESS_OPTIONS = 'module=true,toplevel=true,reduce_vars=false,hoist_vars=false'


class TerserMinifier:
    """Runs terser over JavaScript source fed on stdin."""

    def __init__(self, command: Optional[List[str]] = None, ecma: int = 2020,
                 timeout_seconds: int = 60):
        """Initialize minifier.

        Args:
            command: Command used to launch terser, e.g. ``['npx', 'terser']``.
            ecma: ECMAScript version targeted by the output.
            timeout_seconds: Maximum time allowed per file.
        """
        self.command = list(command or DEFAULT_COMMAND)
        self.ecma = ecma
        self.timeout_seconds = timeout_seconds
        self.logger = logging.getLogger(__name__)

    def build_command(self) -> List[str]:
        return self.command + [
            '--ecma', str(self.ecma),
            '--module',
            '--toplevel',
            '--mangle',
            '--compress', COMPRESS_OPTIONS,
        ]

    def is_available(self) -> bool:
        """Check whether the terser executable can be found."""
        return shutil.which(self.command[0]) is not None

    def minify(self, code: str) -> str:
        """Minify JavaScript source.

        Args:
            code: Source text.

        Returns:
            Minified source text.

        Raises:
            MinifierError: If terser cannot be run or rejects the input.
        """
        cmd = self.build_command()
        try:
            result = subprocess.run(cmd, input=code, capture_output=True, text=True,
                                    encoding='utf-8', timeout=self.timeout_seconds)
        except subprocess.TimeoutExpired:
            raise MinifierError(f"terser timed out after {self.timeout_seconds}s")
        except OSError as e:
            raise MinifierError(f"could not run {self.command[0]}: {e}")

        if result.returncode != 0:
            raise MinifierError(f"terser exited with code {result.returncode}: {result.stderr.strip()}")

        return result.stdout.rstrip('\n')
