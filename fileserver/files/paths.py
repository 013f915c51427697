"""
Path resolution for user supplied paths.

Paths are taken as given: relative paths resolve against the process working
directory, absolute paths and ".." segments are accepted unchanged. There is
no sandboxing of any kind.
"""

from typing import Optional

DEFAULT_ROOT = "."


def resolve_path(path: Optional[str]) -> str:
    """Return the directory a listing request targets, "." when absent"""
    if path is None:
        return DEFAULT_ROOT
    return path


def join_path(base: str, name: str) -> str:
    """
    Join a base directory and a child name with a "/" separator.

    An empty base yields the bare name, i.e. a path relative to the working
    directory. This differs from plain "{base}/{name}" formatting, which
    would give "/name" at the filesystem root for an empty base.
    """
    if not base:
        return name
    return f"{base}/{name}"
