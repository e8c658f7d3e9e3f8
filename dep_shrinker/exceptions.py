"""Exceptions raised by the dependency shrinker."""


class DependencyShrinkerError(Exception):
    """Base class for errors that abort a shrink run."""


class ShrinkError(DependencyShrinkerError):
    """The target directory could not be prepared."""


class InstallError(DependencyShrinkerError):
    """The package manager failed to reinstall dependencies."""


class MinifierError(Exception):
    """The JavaScript minifier failed on a single input."""
