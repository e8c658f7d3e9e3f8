"""Reporters for shrink results."""

from .summary_reporter import SummaryReporter

__all__ = ["SummaryReporter"]
