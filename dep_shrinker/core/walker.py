"""Directory traversal that applies the file policy to a dependency tree."""

import os
import logging
from typing import List, Optional

from .classifier import classify
from .models import FileAction, FileOutcome, OutcomeStatus, RunStatistics
from ..utils.formatters import format_kilobytes


class TreeWalker:
    """Walks a directory tree deleting and compressing files."""

    def __init__(self, js_compressor, json_compressor):
        """Initialize tree walker.

        Args:
            js_compressor: Compressor used for COMPRESS_JS files.
            json_compressor: Compressor used for COMPRESS_JSON files.
        """
        self.js_compressor = js_compressor
        self.json_compressor = json_compressor
        self.logger = logging.getLogger(__name__)

    def walk(self, root: str, stats: Optional[RunStatistics] = None) -> RunStatistics:
        """Process every file below a directory.

        Subdirectories are handled depth-first using an explicit stack, so
        deep trees do not hit the recursion limit. Errors on individual
        files or subdirectories are logged and never stop the walk.

        Args:
            root: Directory to process.
            stats: Statistics record to update. A new one is created if omitted.

        Returns:
            The updated statistics record.

        Raises:
            FileNotFoundError: If root does not exist.
            NotADirectoryError: If root is not a directory.
        """
        if stats is None:
            stats = RunStatistics()

        if not os.path.exists(root):
            raise FileNotFoundError(f"Path does not exist: {root}")

        if not os.path.isdir(root):
            raise NotADirectoryError(f"Path is not a directory: {root}")

        self.logger.info(f"Starting walk of {root}")

        stack = [root]
        while stack:
            directory = stack.pop()
            subdirectories = self._process_directory(directory, stats)
            # Reversed so the first listed subdirectory is popped first
            stack.extend(reversed(subdirectories))

        self.logger.info(f"Completed walk of {root}, visited {stats.files_visited} files")
        return stats

    def _process_directory(self, directory: str, stats: RunStatistics) -> List[str]:
        """Process the files of one directory and return its subdirectories."""
        subdirectories = []

        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            self.logger.error(f"Error listing {directory}: {e}")
            return subdirectories

        for entry in entries:
            try:
                if entry.is_symlink():
                    continue
                if entry.is_dir(follow_symlinks=False):
                    subdirectories.append(entry.path)
                    continue
                if not entry.is_file(follow_symlinks=False):
                    continue
            except OSError as e:
                self.logger.error(f"Error inspecting {entry.path}: {e}")
                continue

            stats.record(self.process_file(entry.name, entry.path))

        return subdirectories

    def process_file(self, name: str, path: str) -> FileOutcome:
        """Classify a file and apply the matching action.

        Args:
            name: Base name of the file.
            path: Full path of the file.

        Returns:
            FileOutcome for the file.
        """
        action = classify(name)

        if action is FileAction.DELETE:
            return self._delete_file(path)
        if action is FileAction.COMPRESS_JS:
            return self.js_compressor.compress(path)
        if action is FileAction.COMPRESS_JSON:
            return self.json_compressor.compress(path)

        return FileOutcome(path=path, action=action, status=OutcomeStatus.SKIPPED)

    def _delete_file(self, path: str) -> FileOutcome:
        try:
            size = os.lstat(path).st_size
            os.unlink(path)
        except OSError as e:
            self.logger.error(f"Error deleting {path}: {e}")
            return FileOutcome.failed(path, FileAction.DELETE, e)

        self.logger.info(f"Deleted {path} ({format_kilobytes(size)})")
        return FileOutcome(path=path, action=FileAction.DELETE, status=OutcomeStatus.APPLIED,
                           bytes_before=size, bytes_after=0)
