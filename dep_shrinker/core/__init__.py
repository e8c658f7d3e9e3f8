"""Core shrinking functionality."""

from .shrinker import DependencyShrinker
from .walker import TreeWalker
from .classifier import classify
from .compressors import JsCompressor, JsonCompressor
from .installer import PackageInstaller
from .minifier import TerserMinifier
from .models import FileAction, FileOutcome, OutcomeStatus, RunStatistics

__all__ = ["DependencyShrinker", "TreeWalker", "classify", "JsCompressor", "JsonCompressor",
           "PackageInstaller", "TerserMinifier", "FileAction", "FileOutcome", "OutcomeStatus",
           "RunStatistics"]
