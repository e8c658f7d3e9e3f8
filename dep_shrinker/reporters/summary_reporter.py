"""Summary reporting for shrink runs."""

import json

from ..core.models import RunStatistics
from ..utils.formatters import format_kilobytes


class SummaryReporter:
    """Renders run statistics for display."""

    def format_text(self, stats: RunStatistics) -> str:
        """Render a human readable summary.

        Args:
            stats: Statistics of a finished run.

        Returns:
            Multi-line summary text.
        """
        lines = [
            "Summary:",
            f"  - Compressed JS files: {stats.js_files_compressed}",
            f"  - Compressed JSON files: {stats.json_files_compressed}",
            f"  - Deleted files: {stats.deleted_files}",
            f"  - Space saved: {format_kilobytes(stats.space_saved)}",
            f"  - Total memory freed: {format_kilobytes(stats.space_freed)}",
        ]

        if stats.failed_files:
            lines.append(f"  - Files with errors: {stats.failed_files}")

        return "\n".join(lines)

    def format_json(self, stats: RunStatistics) -> str:
        """Render the statistics as a JSON document."""
        return json.dumps(stats.to_dict(), indent=2)

    def render(self, stats: RunStatistics, output: str = 'text') -> str:
        if output == 'json':
            return self.format_json(stats)
        return self.format_text(stats)
