"""Formatting utilities for shrink summaries and log messages."""


def format_kilobytes(size_bytes: int) -> str:
    """Format a byte count as kilobytes with two decimals.

    Args:
        size_bytes: Size in bytes.

    Returns:
        String such as ``"12.34 KB"``.
    """
    return f"{size_bytes / 1024:.2f} KB"
