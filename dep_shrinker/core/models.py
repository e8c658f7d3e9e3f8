"""Data models for dependency tree shrinking."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FileAction(Enum):
    """Action decided for a file from its name."""
    DELETE = "delete"
    COMPRESS_JS = "compress_js"
    COMPRESS_JSON = "compress_json"
    SKIP = "skip"


class OutcomeStatus(Enum):
    """Result of applying a file action."""
    APPLIED = "applied"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class FileOutcome:
    """Outcome of processing a single file."""
    path: str
    action: FileAction
    status: OutcomeStatus
    bytes_before: int = 0
    bytes_after: int = 0
    error: Optional[str] = None

    @property
    def bytes_reclaimed(self) -> int:
        return self.bytes_before - self.bytes_after

    @classmethod
    def failed(cls, path: str, action: FileAction, error: Exception) -> 'FileOutcome':
        return cls(path=path, action=action, status=OutcomeStatus.FAILED, error=str(error))


@dataclass
class RunStatistics:
    """Counters accumulated over one walk of a dependency tree."""
    js_files_compressed: int = 0
    json_files_compressed: int = 0
    deleted_files: int = 0
    space_saved: int = 0
    space_freed: int = 0
    files_visited: int = 0
    failed_files: int = 0

    def record(self, outcome: FileOutcome) -> None:
        """Fold a file outcome into the counters.

        Only APPLIED outcomes touch the byte counters: deletions add to
        space_freed, compressions to space_saved.
        """
        self.files_visited += 1

        if outcome.status is OutcomeStatus.FAILED:
            self.failed_files += 1
            return

        if outcome.status is not OutcomeStatus.APPLIED:
            return

        if outcome.action is FileAction.DELETE:
            self.deleted_files += 1
            self.space_freed += outcome.bytes_before
        elif outcome.action is FileAction.COMPRESS_JS:
            self.js_files_compressed += 1
            self.space_saved += outcome.bytes_reclaimed
        elif outcome.action is FileAction.COMPRESS_JSON:
            self.json_files_compressed += 1
            self.space_saved += outcome.bytes_reclaimed

    def to_dict(self) -> dict:
        return {
            'js_files_compressed': self.js_files_compressed,
            'json_files_compressed': self.json_files_compressed,
            'deleted_files': self.deleted_files,
            'space_saved': self.space_saved,
            'space_freed': self.space_freed,
            'files_visited': self.files_visited,
            'failed_files': self.failed_files,
        }
