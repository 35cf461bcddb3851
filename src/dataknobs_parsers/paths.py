"""Paths locating values within nested input.

A path is an immutable tuple of segments. String segments are mapping keys,
integer segments are sequence indexes and any other hashable object acts as
a symbolic key. Paths are only ever extended by building a new tuple, so
sibling branches of a traversal never see each other's segments.
"""

from collections.abc import Hashable, Sequence
from typing import Tuple

PathSegment = Hashable
Path = Tuple[PathSegment, ...]


def extend_path(path: Sequence[PathSegment], segment: PathSegment) -> Path:
    """Return a new path with ``segment`` appended to ``path``.

    Args:
        path: The parent path (any sequence, normalized to a tuple)
        segment: Key, index or symbolic key of the child value

    Returns:
        The child path
    """
    return (*path, segment)


def format_path(path: Sequence[PathSegment]) -> str:
    """Format a path for use in error messages.

    The first string segment is emitted bare, every later string segment is
    prefixed with a dot and all other segments are wrapped in brackets.

    Example:
        ```python
        format_path(())
        # '""'
        format_path(("servers", 0, "host"))
        # '"servers[0].host"'
        ```
    """
    parts = []
    for i, segment in enumerate(path):
        if isinstance(segment, str):
            parts.append(segment if i == 0 else f".{segment}")
        else:
            parts.append(f"[{segment}]")
    return '"' + "".join(parts) + '"'
