"""Go module root discovery."""

from __future__ import annotations

from pathlib import Path

DEFAULT_MARKER = "go.mod"


def locate_project_root(file_path: str | Path, marker: str = DEFAULT_MARKER) -> Path | None:
    """Return the nearest directory at or above `file_path`'s parent holding `marker`.

    The walk starts at the file's own directory (inclusive) and stops at the
    filesystem root, returning None when no marker is found. Existence of
    `file_path` itself is not checked.
    """
    current = Path(file_path).resolve().parent
    while True:
        if (current / marker).is_file():
            return current
        parent = current.parent
        if parent == current:
            return None
        current = parent
