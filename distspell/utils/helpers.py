"""Shared utility functions for DistSpell."""

import os
import re
from re import Pattern


def compile_wildcard_regex(pattern: str) -> Pattern:
    """Converts a simple wildcard pattern (* syntax) to a compiled regex object.

    e.g., 'in*' -> '^in.*$', '*in' -> '^.*in$', '*teh*' -> '^.*teh.*$'
    """
    parts = [re.escape(part) for part in pattern.split("*")]
    regex_str = ".*".join(parts)
    return re.compile(f"^{regex_str}$")


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def chunk_evenly(items: list[str], chunk_count: int) -> list[list[str]]:
    """Split a list into at most chunk_count contiguous, non-empty chunks.

    Chunk sizes differ by at most one, and concatenating the chunks gives
    back the input list.
    """
    if chunk_count < 1:
        raise ValueError(f"chunk_count must be >= 1, got {chunk_count}")
    if not items:
        return []

    chunk_count = min(chunk_count, len(items))
    size, remainder = divmod(len(items), chunk_count)
    chunks = []
    start = 0
    for index in range(chunk_count):
        end = start + size + (1 if index < remainder else 0)
        chunks.append(items[start:end])
        start = end
    return chunks
