"""
Dependency Shrinker - Slim down installed dependency trees.

This package reinstalls a project's dependencies in production-only mode,
deletes development artifacts such as docs, type definitions and lint
configuration, and minifies the remaining JavaScript and JSON files.
"""

__version__ = "1.0.0"

from .core.shrinker import DependencyShrinker
from .core.walker import TreeWalker
from .reporters.summary_reporter import SummaryReporter

__all__ = ["DependencyShrinker", "TreeWalker", "SummaryReporter"]
