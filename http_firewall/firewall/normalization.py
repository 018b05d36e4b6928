"""Traversal-segment detection for decoded request paths."""

from __future__ import annotations


def is_normalized(path: str | None) -> bool:
    """Return ``True`` if *path* has no ``.`` or ``..`` segment.

    ``None`` means the path component does not exist and is always accepted.

    Scans right to left, one ``/`` boundary at a time, so no list of
    segments is built and the first offending segment ends the scan.  The
    start of the string counts as a boundary, which means ``"."`` and
    ``".."`` on their own are rejected too.
    """
    if path is None:
        return True

    j = len(path)
    while j > 0:
        i = path.rfind("/", 0, j)
        gap = j - i

        if gap == 2 and path[i + 1] == ".":
            # ".", "/./" or "/."
            return False
        if gap == 3 and path[i + 1] == "." and path[i + 2] == ".":
            return False

        j = i

    return True
