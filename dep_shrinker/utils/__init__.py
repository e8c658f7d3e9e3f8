"""Utility modules for dependency shrinking."""

from .formatters import format_kilobytes

__all__ = ["format_kilobytes"]
